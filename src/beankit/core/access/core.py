"""Read and write single properties by name or by accessor reference.

Usage:
    set_property(user, "name", "Ada")
    get_property(user, "name")          # "Ada"

    # Accessor references are decoded to property names first
    set_property(user, User.set_age, 36)
    get_property(user, User.get_age)    # 36
"""

from __future__ import annotations

from typing import Any

from beankit.core.accessor import PropertyRef, property_name_of
from beankit.core.descriptor import AttributeDescriptor, DescriptorResolver, get_resolver
from beankit.core.errors import (
    InvocationFailure,
    PropertyNotReadable,
    PropertyNotWritable,
    TypeMismatch,
)


def read_attribute(bean: Any, attribute: AttributeDescriptor) -> Any:
    """Invoke a resolved read accessor on a bean.

    Args:
        bean: Instance to read from.
        attribute: Descriptor resolved for type(bean).

    Returns:
        The attribute's current value.

    Raises:
        PropertyNotReadable: If the attribute is write-only.
        InvocationFailure: If the accessor raises.
    """
    if attribute.read is None:
        raise PropertyNotReadable(type(bean), attribute.name)
    try:
        return attribute.read(bean)
    except Exception as e:
        raise InvocationFailure(type(bean), attribute.name, e) from e


def write_attribute(
    bean: Any,
    attribute: AttributeDescriptor,
    value: Any,
    check_types: bool = True,
) -> None:
    """Invoke a resolved write accessor on a bean. Never coerces value.

    Args:
        bean: Instance to write to.
        attribute: Descriptor resolved for type(bean).
        value: Value to assign.
        check_types: Reject values not conforming to the attribute's annotation.

    Raises:
        PropertyNotWritable: If the attribute is read-only.
        TypeMismatch: If the value does not conform, or the accessor rejects it
            with TypeError or ValueError.
        InvocationFailure: If the accessor fails in any other way.
    """
    if attribute.write is None:
        raise PropertyNotWritable(type(bean), attribute.name)
    if check_types and not attribute.accepts(value):
        raise TypeMismatch(type(bean), attribute.name, value, expected=attribute.annotation)
    try:
        attribute.write(bean, value)
    except (TypeError, ValueError) as e:
        raise TypeMismatch(type(bean), attribute.name, value, cause=e) from e
    except Exception as e:
        raise InvocationFailure(type(bean), attribute.name, e) from e


def get_property(bean: Any, ref: PropertyRef, *, resolver: DescriptorResolver | None = None) -> Any:
    """Read a property of a bean.

    Args:
        bean: Instance to read from.
        ref: Property name, or a getter/setter reference such as User.get_name.
        resolver: Resolver to use; the process-wide one by default.

    Returns:
        The property's current value.

    Raises:
        InvalidAccessorName: If ref is an accessor that cannot be decoded.
        PropertyNotFound: If the bean's type has no such property.
        PropertyNotReadable: If the property is write-only.
        InvocationFailure: If the read accessor raises.
    """
    resolver = resolver or get_resolver()
    attribute = resolver.resolve_attribute(type(bean), property_name_of(ref))
    return read_attribute(bean, attribute)


def set_property(
    bean: Any,
    ref: PropertyRef,
    value: Any,
    *,
    resolver: DescriptorResolver | None = None,
) -> None:
    """Write a property of a bean.

    Args:
        bean: Instance to write to.
        ref: Property name, or a getter/setter reference such as User.set_name.
        value: Value to assign, as is.
        resolver: Resolver to use; the process-wide one by default.

    Raises:
        InvalidAccessorName: If ref is an accessor that cannot be decoded.
        PropertyNotFound: If the bean's type has no such property.
        PropertyNotWritable: If the property is read-only.
        TypeMismatch: If the value does not fit the property.
        InvocationFailure: If the write accessor fails otherwise.
    """
    resolver = resolver or get_resolver()
    attribute = resolver.resolve_attribute(type(bean), property_name_of(ref))
    write_attribute(bean, attribute, value, check_types=resolver.settings.check_types)


def has_property(bean: Any, ref: PropertyRef, *, resolver: DescriptorResolver | None = None) -> bool:
    """Check whether the bean's type has a property, readable or not."""
    resolver = resolver or get_resolver()
    return property_name_of(ref) in resolver.resolve_type(type(bean))


def is_readable(bean: Any, ref: PropertyRef, *, resolver: DescriptorResolver | None = None) -> bool:
    """Check whether a property can be read.

    Raises:
        PropertyNotFound: If the bean's type has no such property.
    """
    resolver = resolver or get_resolver()
    return resolver.resolve_attribute(type(bean), property_name_of(ref)).can_read


def is_writable(bean: Any, ref: PropertyRef, *, resolver: DescriptorResolver | None = None) -> bool:
    """Check whether a property can be written.

    Raises:
        PropertyNotFound: If the bean's type has no such property.
    """
    resolver = resolver or get_resolver()
    return resolver.resolve_attribute(type(bean), property_name_of(ref)).can_write
