"""Property access facade: get and set single properties by name or accessor."""

from beankit.core.access.core import (
    get_property,
    has_property,
    is_readable,
    is_writable,
    read_attribute,
    set_property,
    write_attribute,
)

__all__ = [
    "get_property",
    "has_property",
    "is_readable",
    "is_writable",
    "read_attribute",
    "set_property",
    "write_attribute",
]
