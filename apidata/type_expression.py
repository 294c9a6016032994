"""Data models for JSDoc type expressions as emitted by the comment parser.

Each variant mirrors one ``type`` tag of the doctrine type grammar and carries
only the fields that tag uses. Tags outside the supported set are kept as
``OtherType`` so the normalizer still has a name or sub-expression to fall
back on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class NameExpression:
    """A plain type name, e.g. ``string`` or ``tui.Grid``."""

    name: str


@dataclass(frozen=True)
class NullableType:
    """``?T``."""

    expression: TypeExpression | None


@dataclass(frozen=True)
class NonNullableType:
    """``!T``."""

    expression: TypeExpression | None


@dataclass(frozen=True)
class RestType:
    """``...T``."""

    expression: TypeExpression | None


@dataclass(frozen=True)
class OptionalType:
    """``T=``, also produced for ``[name]`` parameters."""

    expression: TypeExpression | None


@dataclass(frozen=True)
class AllLiteral:
    """``*``."""


@dataclass(frozen=True)
class UnionType:
    """``(A|B)``."""

    elements: tuple[TypeExpression, ...]


@dataclass(frozen=True)
class TypeApplication:
    """``Outer.<A, B>``."""

    expression: TypeExpression | None
    applications: tuple[TypeExpression, ...]


@dataclass(frozen=True)
class RecordType:
    """``{a: number}``; field shapes are never rendered, only counted."""

    fields: tuple[dict[str, Any], ...]


@dataclass(frozen=True)
class OtherType:
    """Any tag the normalizer has no dedicated rule for."""

    type: str
    name: str | None = None
    expression: TypeExpression | None = None


TypeExpression = Union[
    NameExpression,
    NullableType,
    NonNullableType,
    RestType,
    OptionalType,
    AllLiteral,
    UnionType,
    TypeApplication,
    RecordType,
    OtherType,
]

_WRAPPERS = {
    "NullableType": NullableType,
    "NonNullableType": NonNullableType,
    "RestType": RestType,
    "OptionalType": OptionalType,
}


def parse_type_expression(raw: Any) -> TypeExpression | None:
    """Build a typed expression tree from the parser's dict form.

    Returns None for missing or non-dict input; never raises on partial data.
    """
    if not isinstance(raw, dict) or not raw:
        return None

    tag = raw.get("type") or ""
    if tag == "NameExpression":
        return NameExpression(raw.get("name") or "")
    if tag in _WRAPPERS:
        return _WRAPPERS[tag](parse_type_expression(raw.get("expression")))
    if tag == "AllLiteral":
        return AllLiteral()
    if tag == "UnionType":
        return UnionType(_parse_all(raw.get("elements")))
    if tag == "TypeApplication":
        return TypeApplication(
            parse_type_expression(raw.get("expression")),
            _parse_all(raw.get("applications")),
        )
    if tag == "RecordType":
        return RecordType(tuple(raw.get("fields") or ()))

    # Untagged union members still show up with only applications or fields.
    if raw.get("applications") is not None:
        return TypeApplication(
            parse_type_expression(raw.get("expression")),
            _parse_all(raw.get("applications")),
        )
    if raw.get("fields") is not None:
        return RecordType(tuple(raw.get("fields") or ()))
    return OtherType(
        type=tag,
        name=raw.get("name"),
        expression=parse_type_expression(raw.get("expression")),
    )


def _parse_all(items: Any) -> tuple[TypeExpression, ...]:
    parsed = []
    for item in items or []:
        expr = parse_type_expression(item)
        parsed.append(expr if expr is not None else OtherType(type=""))
    return tuple(parsed)
