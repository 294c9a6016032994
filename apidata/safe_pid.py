"""Utility for turning page identifiers into safe file name stems."""

import re

# Keep letters, digits, underscore, dot and dash.
UNSAFE_RE = re.compile(r"[^A-Za-z0-9_.-]+")


def safe_pid(pid: str) -> str:
    """Make a stable, filesystem-safe identifier.

    ``module:Grid#setData`` -> ``module-Grid-setData``.
    """
    pid = UNSAFE_RE.sub("-", pid).strip("-.")
    return pid or "Unknown"
