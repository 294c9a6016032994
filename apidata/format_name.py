"""Logic for formatting the display name of function-like items."""

from typing import Any

EXTERNAL_MARKER = "external:"


def format_name(name: str, kind: str, params: list[dict[str, Any]] | None) -> str:
    """Format a display name, e.g. ``foo(a, b)`` or ``new Foo(a)``.

    Events show only the event name, typedefs and namespaces show the raw name.
    """
    joined = ", ".join(str(p.get("name") or "") for p in params or [])

    if kind == "class":
        return f"new {name}({joined})"
    if EXTERNAL_MARKER in name:
        # external:jQuery#fn.foo -> fn.foo(...)
        short = name.split(EXTERNAL_MARKER)[-1].split("#")[-1]
        return f"{short}({joined})"
    if kind == "event":
        return name.split("#")[-1]
    if kind in ("typedef", "namespace"):
        return name
    return f"{name}({joined})"
