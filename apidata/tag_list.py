"""Data model for rendered tag lists that always end in a default element."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class TagList(Generic[T]):
    """Rendered tag entries plus the trailing default the frontend indexes into."""

    items: tuple[T, ...]
    default: T

    def to_list(self) -> list[T]:
        """Return the entries followed by exactly one default element."""
        return [*self.items, self.default]

    def to_json(self, convert: Callable[[T], Any] | None = None) -> list[Any]:
        """Return a JSON-ready list, converting each element when asked."""
        if convert is None:
            return self.to_list()
        return [convert(item) for item in self.to_list()]
