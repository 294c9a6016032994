"""Data models for the render-ready records written to the API page JSON."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from apidata.display_type import DisplayType
from apidata.tag_list import TagList


@dataclass(frozen=True)
class TypeView:
    """Flat display form of a type expression."""

    prefix: str = ""
    names: list[str] = field(default_factory=lambda: [""])
    is_optional: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "prefix": self.prefix,
            "names": list(self.names),
            "isOptional": self.is_optional,
        }


@dataclass(frozen=True)
class ParamView:
    """One ``@param`` (or ``@property`` for events and typedefs)."""

    name: str = ""
    types: TypeView = field(default_factory=TypeView)
    default_val: Any = None
    description: str = ""
    properties: TagList[ParamView] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "types": self.types.to_dict(),
            "defaultVal": self.default_val,
            "description": self.description,
            "properties": (
                self.properties.to_json(ParamView.to_dict)
                if self.properties is not None
                else None
            ),
        }


@dataclass(frozen=True)
class ReturnView:
    """One ``@returns`` entry."""

    types: TypeView = field(default_factory=TypeView)
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"types": self.types.to_dict(), "description": self.description}


@dataclass(frozen=True)
class ExampleView:
    """One ``@example`` with its caption and highlighted code."""

    description: str = ""
    code: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"description": self.description, "code": self.code}


@dataclass(frozen=True)
class CodeInfo:
    """Where an item is declared and its permalink in the hosted repository."""

    filename: str = ""
    line_num: int = 0
    link_url: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "filename": self.filename,
            "lineNum": self.line_num,
            "linkUrl": self.link_url,
        }


@dataclass(frozen=True)
class DisplayItem:
    """Render-ready record for one documented entity or member.

    ``params`` and ``returns`` are only set for function-like items and are
    left out of the JSON entirely for properties.
    """

    type: DisplayType
    pid: str
    override: bool
    deprecated: bool
    name: str
    types: TypeView
    description: str
    code_info: CodeInfo
    sees: TagList[str]
    augments: TagList[str]
    todos: TagList[str]
    examples: TagList[ExampleView]
    params: TagList[ParamView] | None = None
    returns: TagList[ReturnView] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.type.value,
            "pid": self.pid,
            "override": self.override,
            "deprecated": self.deprecated,
            "name": self.name,
            "types": self.types.to_dict(),
            "description": self.description,
            "codeInfo": self.code_info.to_dict(),
            "sees": self.sees.to_json(),
            "augments": self.augments.to_json(),
            "todos": self.todos.to_json(),
        }
        if self.params is not None:
            data["params"] = self.params.to_json(ParamView.to_dict)
        if self.returns is not None:
            data["returns"] = self.returns.to_json(ReturnView.to_dict)
        data["examples"] = self.examples.to_json(ExampleView.to_dict)
        return data
