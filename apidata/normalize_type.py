"""Logic for flattening type expressions into their display form."""

from typing import Any

from apidata.display_item import TypeView
from apidata.type_expression import (
    AllLiteral,
    NameExpression,
    NonNullableType,
    NullableType,
    OptionalType,
    OtherType,
    RecordType,
    RestType,
    TypeApplication,
    TypeExpression,
    UnionType,
    parse_type_expression,
)

PREFIXES: dict[type, str] = {
    NullableType: "?",
    NonNullableType: "!",
    RestType: "...",
    AllLiteral: "*",
}

UNNAMED = "undefined"


def make_types(raw: Any) -> TypeView:
    """Normalize a raw type dict from the parser; missing input gives the empty view."""
    return normalize_type_expression(parse_type_expression(raw))


def normalize_type_expression(expr: TypeExpression | None) -> TypeView:
    """Flatten a type expression into ``{prefix, names, isOptional}``.

    The prefix comes from the wrapped sub-expression, never the outer node, so
    ``=?string`` (optional nullable) shows ``?`` while the names come from the
    outer node first and only fall back to the sub-expression.
    """
    if expr is None:
        return TypeView()

    sub = _sub_expression(expr)
    prefix = PREFIXES.get(type(sub), "") if sub is not None else ""
    return TypeView(
        prefix=prefix,
        names=_names(expr),
        is_optional=isinstance(expr, OptionalType),
    )


def _names(expr: TypeExpression | None) -> list[str]:
    if isinstance(expr, UnionType):
        return [_union_member_name(el) for el in expr.elements]
    if isinstance(expr, TypeApplication):
        return [_application_name(expr)]
    if isinstance(expr, RecordType):
        return ["Object"]
    if isinstance(expr, NameExpression):
        return [expr.name]
    sub = _sub_expression(expr) if expr is not None else None
    if sub is not None:
        return _sub_expression_names(sub)
    return [""]


def _sub_expression_names(sub: TypeExpression) -> list[str]:
    # Only one level deep: records and other unnamed nodes give "".
    if isinstance(sub, UnionType):
        return [_union_member_name(el) for el in sub.elements]
    if isinstance(sub, TypeApplication):
        return [_application_name(sub)]
    inner = _sub_expression(sub)
    if inner is not None:
        return [_plain_name(inner)]
    return [_plain_name(sub)]


def _plain_name(expr: TypeExpression) -> str:
    if isinstance(expr, (NameExpression, OtherType)):
        return expr.name or ""
    return ""


def _sub_expression(expr: TypeExpression) -> TypeExpression | None:
    if isinstance(
        expr, (NullableType, NonNullableType, RestType, OptionalType, OtherType)
    ):
        return expr.expression
    if isinstance(expr, TypeApplication):
        return expr.expression
    return None


def _own_name(expr: TypeExpression | None) -> str:
    if isinstance(expr, (NameExpression, OtherType)) and expr.name:
        return expr.name
    return UNNAMED


def _application_name(expr: TypeApplication) -> str:
    # Array.<string, number> -> "Array.string,number"
    joined = ",".join(_own_name(app) for app in expr.applications)
    return f"{_own_name(expr.expression)}.{joined}"


def _union_member_name(expr: TypeExpression) -> str:
    if isinstance(expr, TypeApplication):
        return _application_name(expr)
    if isinstance(expr, RecordType):
        return "Object"
    return _own_name(expr)
