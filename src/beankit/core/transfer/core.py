"""Bulk copy of same-named properties from one bean to another.

Usage:
    copy_properties(source, target)
    copy_properties(source, target, skip_null_source=True, excluded=["age"])
    updated = copy_bean(source, User(), excluded=[User.get_password])

Source and target may be of different types: a property is copied when the
source can read it and the target has a writable property of the same name.
Values are assigned as they are, with no coercion and no nested copying.

Copies are not transactional. If a write fails the error propagates and the
writes already made to the target stay in place; copy into a fresh instance
and swap it in if atomicity is needed.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from beankit.core.access import read_attribute, write_attribute
from beankit.core.accessor import PropertyRef
from beankit.core.descriptor import DescriptorResolver, get_resolver
from beankit.core.transfer.models import CopyOptions


def copy_with_options(
    source: Any,
    target: Any,
    options: CopyOptions,
    *,
    resolver: DescriptorResolver | None = None,
) -> None:
    """Copy matching properties from source to target under options.

    Args:
        source: Bean to read from. Never mutated.
        target: Bean to write to, in place.
        options: Exclusion policy.
        resolver: Resolver to use; the process-wide one by default.

    Raises:
        InvocationFailure: If a source read or target write accessor fails.
        TypeMismatch: If a value does not fit the target property.
    """
    resolver = resolver or get_resolver()
    source_type = resolver.resolve_type(type(source))
    target_type = resolver.resolve_type(type(target))

    excluded = set(options.excluded_names)
    if options.skip_null_source:
        # Only true absence counts, empty strings and containers are copied
        excluded.update(
            attribute.name
            for attribute in source_type.readable()
            if attribute.name not in excluded and read_attribute(source, attribute) is None
        )

    check_types = resolver.settings.check_types
    for attribute in source_type.readable():
        if attribute.name in excluded:
            continue
        target_attribute = target_type.get(attribute.name)
        if target_attribute is None or not target_attribute.can_write:
            continue
        value = read_attribute(source, attribute)
        write_attribute(target, target_attribute, value, check_types=check_types)


def copy_properties(
    source: Any,
    target: Any,
    skip_null_source: bool = False,
    excluded: PropertyRef | Iterable[PropertyRef] = (),
    *,
    resolver: DescriptorResolver | None = None,
) -> None:
    """Copy matching properties from source to target.

    Args:
        source: Bean to read from. Never mutated.
        target: Bean to write to, in place.
        skip_null_source: Leave target properties alone where the source value is None.
        excluded: Property names or accessor references never copied.
        resolver: Resolver to use; the process-wide one by default.

    Raises:
        InvalidAccessorName: If an excluded accessor cannot be decoded.
        InvocationFailure: If a source read or target write accessor fails.
        TypeMismatch: If a value does not fit the target property.
    """
    options = CopyOptions.build(skip_null_source, excluded)
    copy_with_options(source, target, options, resolver=resolver)


def copy_bean[T](
    source: Any,
    target: T,
    skip_null_source: bool = False,
    excluded: PropertyRef | Iterable[PropertyRef] = (),
    *,
    resolver: DescriptorResolver | None = None,
) -> T:
    """Copy matching properties into target and return it for chaining.

    Same arguments and errors as copy_properties.

    Returns:
        target, after the copy.
    """
    copy_properties(source, target, skip_null_source, excluded, resolver=resolver)
    return target
