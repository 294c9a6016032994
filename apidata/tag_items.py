"""Logic for converting annotation tag lists into display lists.

Every converter returns a ``TagList``: the converted entries plus one default
element of the same shape, so templates can always address the slot after
the last real entry.
"""

from typing import Any

from apidata.display_item import ExampleView, ParamView, ReturnView, TypeView
from apidata.highlight_code import DEFAULT_LANGUAGE, highlight_code
from apidata.normalize_type import make_types
from apidata.render_description import render_description
from apidata.tag_list import TagList


def make_see_items(items: list[dict[str, Any]] | None) -> TagList[str]:
    """Render ``@see`` descriptions."""
    return TagList(tuple(render_description(it) for it in items or []), "")


def make_augment_items(items: list[dict[str, Any]] | None) -> TagList[str]:
    """Collect the names from ``@augments`` / ``@extends``."""
    return TagList(tuple(str(it.get("name") or "") for it in items or []), "")


def make_todo_items(items: list[dict[str, Any]] | None) -> TagList[str]:
    """Render ``@todo`` descriptions."""
    return TagList(tuple(render_description(it) for it in items or []), "")


def make_params(items: list[dict[str, Any]] | None) -> TagList[ParamView]:
    """Convert ``@param`` entries, recursing into destructured ``properties``."""
    params = []
    for it in items or []:
        if not isinstance(it, dict):
            continue
        nested = it.get("properties")
        properties = make_params(nested) if isinstance(nested, list) else None
        params.append(
            ParamView(
                name=str(it.get("name") or "").split(".")[-1],
                types=make_types(it.get("type")),
                default_val=it.get("default"),
                description=render_description(it.get("description")),
                properties=properties,
            )
        )
    return TagList(tuple(params), ParamView())


def make_return_items(items: list[dict[str, Any]] | None) -> TagList[ReturnView]:
    """Convert ``@returns`` entries."""
    returns = tuple(
        ReturnView(
            types=make_types(it.get("type")),
            description=render_description(it.get("description")),
        )
        for it in items or []
    )
    return TagList(returns, ReturnView(types=TypeView()))


def make_example_items(
    items: list[dict[str, Any]] | None, language: str = DEFAULT_LANGUAGE
) -> TagList[ExampleView]:
    """Convert ``@example`` blocks; the caption is optional."""
    examples = tuple(
        ExampleView(
            description=render_description(it.get("caption")),
            code=highlight_code(str(it.get("description") or ""), language),
        )
        for it in items or []
    )
    return TagList(examples, ExampleView())
