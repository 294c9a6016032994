"""Logic for deriving the page identifier of an item."""


def format_pid(name: str, kind: str) -> str:
    """Return the item's identifier; events become ``event-<name>``.

    Event names look like ``Grid#click``, and a ``#`` would be read as a URL
    fragment, so only the part after the last ``#`` is kept.
    """
    if kind == "event":
        return f"event-{name.split('#')[-1]}"
    return name
