"""Tests for type expression parsing and normalization."""

from apidata.display_item import TypeView
from apidata.normalize_type import make_types, normalize_type_expression
from apidata.type_expression import (
    NameExpression,
    OtherType,
    TypeApplication,
    UnionType,
    parse_type_expression,
)


def name(n: str) -> dict:
    """Build a NameExpression node."""
    return {"type": "NameExpression", "name": n}


def test_empty_input_gives_empty_view() -> None:
    """Verify that missing type data never raises."""
    expected = {"prefix": "", "names": [""], "isOptional": False}
    assert make_types({}).to_dict() == expected
    assert make_types(None).to_dict() == expected
    assert make_types("").to_dict() == expected


def test_name_expression() -> None:
    """Verify a plain name."""
    view = make_types(name("string"))
    assert view == TypeView(prefix="", names=["string"], is_optional=False)


def test_union_of_names() -> None:
    """Verify union members are listed in order."""
    view = make_types(
        {"type": "UnionType", "elements": [name("string"), name("number")]}
    )
    assert view.names == ["string", "number"]


def test_union_of_untagged_members() -> None:
    """Verify members carrying only a name are still resolved."""
    view = make_types(
        {"type": "UnionType", "elements": [{"name": "string"}, {"name": "number"}]}
    )
    assert view.names == ["string", "number"]


def test_union_member_rules() -> None:
    """Verify application, record and unnamed union members."""
    view = make_types(
        {
            "type": "UnionType",
            "elements": [
                {
                    "type": "TypeApplication",
                    "expression": name("Array"),
                    "applications": [name("string"), {"type": "AllLiteral"}],
                },
                {"type": "RecordType", "fields": []},
                {"type": "NullLiteral"},
            ],
        }
    )
    assert view.names == ["Array.string,undefined", "Object", "undefined"]


def test_type_application() -> None:
    """Verify Array.<string> renders as a single joined name."""
    view = make_types(
        {
            "type": "TypeApplication",
            "expression": name("Array"),
            "applications": [name("string")],
        }
    )
    assert view.names == ["Array.string"]
    assert view.prefix == ""


def test_type_application_multiple_arguments() -> None:
    """Verify inner names are comma joined."""
    view = make_types(
        {
            "type": "TypeApplication",
            "expression": name("Map"),
            "applications": [name("string"), name("number")],
        }
    )
    assert view.names == ["Map.string,number"]


def test_record_type() -> None:
    """Verify record types render as Object."""
    view = make_types({"type": "RecordType", "fields": [{"key": "a"}]})
    assert view.names == ["Object"]


def test_optional_nullable_prefix() -> None:
    """Verify the prefix comes from the wrapped expression."""
    view = make_types(
        {
            "type": "OptionalType",
            "expression": {"type": "NullableType", "expression": name("string")},
        }
    )
    assert view == TypeView(prefix="?", names=["string"], is_optional=True)


def test_outer_nullable_has_no_prefix() -> None:
    """Verify the outer node never contributes a prefix."""
    view = make_types({"type": "NullableType", "expression": name("string")})
    assert view.prefix == ""
    assert view.names == ["string"]


def test_prefix_table() -> None:
    """Verify each wrapper tag maps to its prefix."""
    cases = {
        "NullableType": "?",
        "NonNullableType": "!",
        "RestType": "...",
    }
    for tag, prefix in cases.items():
        view = make_types(
            {
                "type": "OptionalType",
                "expression": {"type": tag, "expression": name("T")},
            }
        )
        assert view.prefix == prefix
        assert view.names == ["T"]

    view = make_types({"type": "RestType", "expression": {"type": "AllLiteral"}})
    assert view.prefix == "*"
    assert view.names == [""]


def test_rest_of_application() -> None:
    """Verify names fall back to an application sub-expression."""
    view = make_types(
        {
            "type": "RestType",
            "expression": {
                "type": "TypeApplication",
                "expression": name("Array"),
                "applications": [name("number")],
            },
        }
    )
    assert view.names == ["Array.number"]


def test_optional_union() -> None:
    """Verify names fall back to a union sub-expression."""
    view = make_types(
        {
            "type": "OptionalType",
            "expression": {
                "type": "UnionType",
                "elements": [name("string"), name("number")],
            },
        }
    )
    assert view.names == ["string", "number"]
    assert view.is_optional


def test_unknown_tag_without_name() -> None:
    """Verify unsupported tags fall back to an empty name."""
    assert make_types({"type": "UndefinedLiteral"}).names == [""]


def test_parse_builds_variants() -> None:
    """Verify the dict form is parsed into typed variants."""
    expr = parse_type_expression(
        {
            "type": "UnionType",
            "elements": [
                name("a"),
                {
                    "type": "TypeApplication",
                    "expression": name("B"),
                    "applications": [],
                },
                {"type": "StringLiteralType", "value": "x"},
            ],
        }
    )
    assert isinstance(expr, UnionType)
    assert expr.elements[0] == NameExpression("a")
    assert isinstance(expr.elements[1], TypeApplication)
    assert isinstance(expr.elements[2], OtherType)
    assert normalize_type_expression(None) == TypeView()


def test_record_sub_expression_has_no_name() -> None:
    """Verify a wrapped record type gives an empty name."""
    view = make_types(
        {"type": "NullableType", "expression": {"type": "RecordType", "fields": []}}
    )
    assert view.names == [""]


def test_untagged_outer_node_has_no_name() -> None:
    """Verify an outer node without a known tag never names itself."""
    assert make_types({"name": "string"}).names == [""]
    assert make_types({"type": "StringLiteralType", "name": "x"}).names == [""]


def test_sub_expression_names_stop_one_level_down() -> None:
    """Verify only the inner node's own name is used below a wrapper."""
    view = make_types(
        {
            "type": "OptionalType",
            "expression": {
                "type": "NullableType",
                "expression": {"type": "RecordType", "fields": []},
            },
        }
    )
    assert view.prefix == "?"
    assert view.names == [""]
