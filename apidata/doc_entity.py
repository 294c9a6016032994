"""Data models for documented entities as produced by documentation.js."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SourceContext:
    """Source file and 1-based start line of a documented entity."""

    file: str
    line: int

    @classmethod
    def from_dict(cls, raw: Any) -> SourceContext | None:
        if not isinstance(raw, dict) or not raw.get("file"):
            return None
        loc = raw.get("loc")
        start = loc.get("start") if isinstance(loc, dict) else None
        line = start.get("line") if isinstance(start, dict) else None
        return cls(file=str(raw["file"]), line=_line_number(line))


@dataclass
class DocEntity:
    """One documented code unit (class, module, function, member, ...).

    Tag lists are kept in the parser's dict form; the tag converters read them
    leniently. Members are parsed recursively.
    """

    name: str
    kind: str
    scope: str | None = None
    type: dict[str, Any] | None = None
    description: dict[str, Any] | None = None
    context: SourceContext | None = None
    override: bool = False
    deprecated: bool = False
    static_members: list[DocEntity] = field(default_factory=list)
    instance_members: list[DocEntity] = field(default_factory=list)
    sees: list[dict[str, Any]] = field(default_factory=list)
    augments: list[dict[str, Any]] = field(default_factory=list)
    todos: list[dict[str, Any]] = field(default_factory=list)
    params: list[dict[str, Any]] = field(default_factory=list)
    properties: list[dict[str, Any]] = field(default_factory=list)
    returns: list[dict[str, Any]] = field(default_factory=list)
    examples: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> DocEntity:
        """Build an entity, defaulting every absent field to an empty value."""
        members = raw.get("members")
        if not isinstance(members, dict):
            members = {}
        return cls(
            name=str(raw.get("name") or ""),
            kind=str(raw.get("kind") or ""),
            scope=raw.get("scope"),
            type=raw.get("type") or None,
            description=raw.get("description") or None,
            context=SourceContext.from_dict(raw.get("context")),
            override=bool(raw.get("override")),
            # @deprecated carries a description tree; presence is what counts.
            deprecated=bool(raw.get("deprecated")),
            static_members=[
                cls.from_dict(m) for m in _dicts(members.get("static"))
            ],
            instance_members=[
                cls.from_dict(m) for m in _dicts(members.get("instance"))
            ],
            sees=_dicts(raw.get("sees")),
            augments=_dicts(raw.get("augments")),
            todos=_dicts(raw.get("todos")),
            params=_dicts(raw.get("params")),
            properties=_dicts(raw.get("properties")),
            returns=_dicts(raw.get("returns")),
            examples=_dicts(raw.get("examples")),
        )


def _dicts(value: Any) -> list[dict[str, Any]]:
    if not isinstance(value, (list, tuple)):
        return []
    return [v for v in value if isinstance(v, dict)]


def _line_number(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0
