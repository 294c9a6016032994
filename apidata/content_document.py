"""Data model for the per-entity document consumed by the API page."""

from dataclasses import dataclass
from typing import Any

from apidata.display_item import DisplayItem


@dataclass(frozen=True)
class ContentDocument:
    """One API page: overview first, then static and instance members."""

    pid: str
    parent_pid: str
    title: str
    items: tuple[DisplayItem, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "pid": self.pid,
            "parentPid": self.parent_pid,
            "title": self.title,
            "items": [item.to_dict() for item in self.items],
        }
