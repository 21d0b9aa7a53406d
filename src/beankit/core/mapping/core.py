"""Convert beans to string-keyed mappings and back.

Usage:
    data = to_mapping(user)               # {"name": "Ada", "age": 36, ...}
    clone = from_mapping(data, User)

    # Unknown keys are ignored, so partial or loose payloads are fine
    user = from_mapping({"name": "Ada", "extra": 1}, User)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from beankit.core.access import read_attribute, write_attribute
from beankit.core.descriptor import DescriptorResolver, get_resolver
from beankit.core.errors import ConstructionFailure


def to_mapping(bean: Any, *, resolver: DescriptorResolver | None = None) -> dict[str, Any]:
    """Read every readable property of a bean into a dict.

    Key order is unspecified unless the resolver's settings enable sort_names.

    Args:
        bean: Instance to read.
        resolver: Resolver to use; the process-wide one by default.

    Returns:
        Mapping of property name to current value.

    Raises:
        InvocationFailure: If a read accessor raises.
    """
    resolver = resolver or get_resolver()
    attributes = resolver.resolve_type(type(bean)).readable()
    if resolver.settings.sort_names:
        attributes = tuple(sorted(attributes, key=lambda a: a.name))
    return {attribute.name: read_attribute(bean, attribute) for attribute in attributes}


def from_mapping[T](
    mapping: Mapping[str, Any],
    target_type: type[T],
    *,
    resolver: DescriptorResolver | None = None,
) -> T:
    """Build a bean from a mapping of property values.

    The instance is created with target_type(), then every key naming a
    writable property is assigned. Other keys are ignored.

    Args:
        mapping: Property values keyed by name.
        target_type: Class to instantiate.
        resolver: Resolver to use; the process-wide one by default.

    Returns:
        The new instance.

    Raises:
        ConstructionFailure: If target_type cannot be called without arguments.
        TypeMismatch: If a value does not fit its property.
        InvocationFailure: If a write accessor fails otherwise.
    """
    resolver = resolver or get_resolver()
    try:
        instance = target_type()
    except Exception as e:
        raise ConstructionFailure(target_type, e) from e

    check_types = resolver.settings.check_types
    for attribute in resolver.resolve_type(target_type).writable():
        if attribute.name in mapping:
            write_attribute(instance, attribute, mapping[attribute.name], check_types=check_types)
    return instance
