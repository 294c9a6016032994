"""Logic for building display items from documented entities."""

from apidata.build_context import BuildContext
from apidata.code_info import make_code_info
from apidata.display_item import DisplayItem
from apidata.display_type import DisplayType
from apidata.doc_entity import DocEntity
from apidata.format_name import format_name
from apidata.format_pid import format_pid
from apidata.normalize_type import make_types
from apidata.render_description import render_description
from apidata.tag_items import (
    make_augment_items,
    make_example_items,
    make_params,
    make_return_items,
    make_see_items,
    make_todo_items,
)

# These kinds describe a shape through @property rather than call parameters.
SHAPE_KINDS = {"event", "typedef"}


def make_property_item(
    entity: DocEntity, display_type: DisplayType, build: BuildContext
) -> DisplayItem:
    """Build an item with name, type and description only (no params/returns)."""
    return DisplayItem(
        type=display_type,
        pid=entity.name,
        override=entity.override,
        deprecated=entity.deprecated,
        name=entity.name,
        types=make_types(entity.type),
        description=render_description(entity.description),
        code_info=make_code_info(entity.context, build),
        sees=make_see_items(entity.sees),
        augments=make_augment_items(entity.augments),
        todos=make_todo_items(entity.todos),
        examples=make_example_items(entity.examples, build.example_language),
    )


def make_function_item(
    entity: DocEntity, display_type: DisplayType, build: BuildContext
) -> DisplayItem:
    """Build a function-like item with a call-style name, params and returns."""
    params = entity.properties if entity.kind in SHAPE_KINDS else entity.params

    return DisplayItem(
        type=display_type,
        pid=format_pid(entity.name, entity.kind),
        override=entity.override,
        deprecated=entity.deprecated,
        name=format_name(entity.name, entity.kind, params),
        types=make_types(entity.type),
        description=render_description(entity.description),
        code_info=make_code_info(entity.context, build),
        sees=make_see_items(entity.sees),
        augments=make_augment_items(entity.augments),
        todos=make_todo_items(entity.todos),
        params=make_params(params),
        returns=make_return_items(entity.returns),
        examples=make_example_items(entity.examples, build.example_language),
    )
