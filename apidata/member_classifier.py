"""Logic for classifying members and dispatching them to an item builder."""

from collections.abc import Callable

from apidata.build_context import BuildContext
from apidata.display_item import DisplayItem
from apidata.display_type import DisplayType
from apidata.doc_entity import DocEntity
from apidata.item_builders import make_function_item, make_property_item

ItemBuilder = Callable[[DocEntity, DisplayType, BuildContext], DisplayItem]

KIND_TYPES: dict[str, DisplayType] = {
    "event": DisplayType.EVENT,
    "typedef": DisplayType.TYPEDEF,
}

SCOPED_TYPES: dict[tuple[str, bool], DisplayType] = {
    ("static", True): DisplayType.STATIC_FUNCTION,
    ("static", False): DisplayType.STATIC_PROPERTY,
    ("instance", True): DisplayType.INSTANCE_FUNCTION,
    ("instance", False): DisplayType.INSTANCE_PROPERTY,
}

FUNCTION_LIKE_TYPES = {
    DisplayType.OVERVIEW,
    DisplayType.STATIC_FUNCTION,
    DisplayType.INSTANCE_FUNCTION,
    DisplayType.EVENT,
    DisplayType.TYPEDEF,
}


def scope_of(scope: str | None) -> str:
    """Collapse a parser scope to ``instance`` or ``static``."""
    return "instance" if scope == "instance" else "static"


def classify_member(kind: str, scope: str | None) -> DisplayType:
    """Return the display type of a member from its kind and scope."""
    if kind in KIND_TYPES:
        return KIND_TYPES[kind]
    return SCOPED_TYPES[(scope_of(scope), kind == "function")]


def builder_for(display_type: DisplayType) -> ItemBuilder:
    """Pick the function builder for function-like types, else the property one."""
    if display_type in FUNCTION_LIKE_TYPES:
        return make_function_item
    return make_property_item


def make_member_item(entity: DocEntity, build: BuildContext) -> DisplayItem:
    """Classify a member and build its display item."""
    display_type = classify_member(entity.kind, entity.scope)
    return builder_for(display_type)(entity, display_type, build)
