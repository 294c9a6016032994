"""Logic for assembling the content document of one documented entity."""

from apidata.build_context import BuildContext
from apidata.content_document import ContentDocument
from apidata.display_item import DisplayItem
from apidata.display_type import DisplayType
from apidata.doc_entity import DocEntity
from apidata.item_builders import make_function_item, make_property_item

# Static members only distinguish functions from everything else: static
# events and typedefs are tagged static-property here, whereas classify_member
# tags them event/typedef.
STATIC_TYPES: dict[bool, DisplayType] = {
    True: DisplayType.STATIC_FUNCTION,
    False: DisplayType.STATIC_PROPERTY,
}


def make_static_items(
    members: list[DocEntity], build: BuildContext
) -> list[DisplayItem]:
    """Build items for every static member."""
    items = []
    for member in members:
        is_function = member.kind == "function"
        builder = make_function_item if is_function else make_property_item
        items.append(builder(member, STATIC_TYPES[is_function], build))
    return items


def make_instance_items(
    members: list[DocEntity], build: BuildContext
) -> list[DisplayItem]:
    """Build items for instance methods; other instance members are skipped."""
    return [
        make_function_item(member, DisplayType.INSTANCE_FUNCTION, build)
        for member in members
        if member.kind == "function"
    ]


def make_title(parent_pid: str) -> str:
    """Upper-case the first character of the parent identifier."""
    return parent_pid[:1].upper() + parent_pid[1:]


def make_content_data(
    pid: str, parent_pid: str, entity: DocEntity, build: BuildContext
) -> ContentDocument:
    """Assemble ``[overview] + static members + instance methods``."""
    overview = make_function_item(entity, DisplayType.OVERVIEW, build)
    static_items = make_static_items(entity.static_members, build)
    instance_items = make_instance_items(entity.instance_members, build)

    return ContentDocument(
        pid=pid,
        parent_pid=parent_pid,
        title=make_title(parent_pid),
        items=(overview, *static_items, *instance_items),
    )
