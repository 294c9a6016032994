"""Display roles the documentation UI understands for an item."""

from enum import Enum


class DisplayType(str, Enum):
    """Value of the ``type`` field on every display item."""

    OVERVIEW = "overview"
    STATIC_FUNCTION = "static-function"
    STATIC_PROPERTY = "static-property"
    INSTANCE_FUNCTION = "instance-function"
    INSTANCE_PROPERTY = "instance-property"
    EVENT = "event"
    TYPEDEF = "typedef"
