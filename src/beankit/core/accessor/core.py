"""Decode accessor references and method-style names into property names.

Usage:
    decode_name("getName")               # "name"
    decode_name("isActive")              # "active"
    decode_accessor_name(User.getAge)    # "age"
    property_name_of(User.get_name)      # "name"
    property_name_of(user.set_age)       # "age"

decode_name and decode_accessor_name apply the prefix rule literally, so
decode_name("get_name") is "_name". parse_accessor and property_name_of
also treat one underscore after the prefix as a snake_case separator; the
resolver and the property facade go through them.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any

from beankit.core.errors import InvalidAccessorName

type PropertyRef = str | Callable[..., Any]
"""A property given either by name or by one of its accessor functions."""

_THREE_LETTER_PREFIXES = ("get", "set")
_TWO_LETTER_PREFIXES = ("is",)


def _split_prefix(raw: str) -> tuple[str, str] | None:
    """Return (prefix, remainder), or None if raw has no accessor prefix."""
    if raw.startswith(_THREE_LETTER_PREFIXES):
        return raw[:3], raw[3:]
    if raw.startswith(_TWO_LETTER_PREFIXES):
        return raw[:2], raw[2:]
    return None


def _lower_first(value: str) -> str:
    return value[:1].lower() + value[1:]


def parse_accessor(raw: str) -> tuple[str, str] | None:
    """Split a conventionally named accessor method into prefix and property.

    Stricter than decode_name: the prefix must be followed by an underscore
    and more text, or by an upper-case letter, so "isolate" or "settle" are
    not accessors. A snake_case separator is dropped: "get_name" gives "name".

    Args:
        raw: Method name such as "getName" or "set_age".

    Returns:
        (prefix, property_name), or None if the name is not an accessor.
    """
    split = _split_prefix(raw)
    if split is None:
        return None
    prefix, rest = split
    if len(rest) > 1 and rest[0] == "_":
        return prefix, rest[1:]
    if rest[:1].isupper():
        return prefix, _lower_first(rest)
    return None


def decode_name(raw: str) -> str:
    """Turn a getter, setter or is-accessor name into its property name.

    Strips "get"/"set" (three characters) or "is" (two characters) and
    lower-cases the first character of what is left. Nothing else is
    normalised, so "get_name" decodes to "_name".

    Args:
        raw: Method-style name.

    Returns:
        Canonical property name.

    Raises:
        InvalidAccessorName: If the name has none of the prefixes, or nothing
            is left once the prefix is removed.
    """
    split = _split_prefix(raw)
    if split is None:
        raise InvalidAccessorName(raw)
    remainder = split[1]
    if not remainder:
        raise InvalidAccessorName(raw, "no property name after prefix")
    return _lower_first(remainder)


def accessor_name_of(ref: Callable[..., Any]) -> str:
    """Recover the implementation name of an accessor reference.

    Handles plain functions, bound methods, static and class methods,
    functools.partial objects, decorated functions (via __wrapped__) and
    property objects (their getter, or setter when write-only).

    Args:
        ref: The accessor reference.

    Returns:
        The underlying function's __name__.

    Raises:
        InvalidAccessorName: If no usable name can be recovered.
    """
    target: Any = ref
    if isinstance(target, property):
        target = target.fget if target.fget is not None else target.fset
    while True:
        if isinstance(target, (staticmethod, classmethod)):
            target = target.__func__
        elif inspect.ismethod(target):
            target = target.__func__
        elif isinstance(target, functools.partial):
            target = target.func
        else:
            break
    if callable(target):
        target = inspect.unwrap(target)

    name = getattr(target, "__name__", None)
    if not isinstance(name, str) or name == "<lambda>":
        raise InvalidAccessorName(repr(ref), "accessor has no recoverable name")
    return name


def decode_accessor_name(ref: PropertyRef) -> str:
    """Decode a property name from a raw name or an accessor reference.

    Args:
        ref: Method-style name, or a getter/setter reference.

    Returns:
        Canonical property name.

    Raises:
        InvalidAccessorName: If the reference or name cannot be decoded.
    """
    if isinstance(ref, str):
        return decode_name(ref)
    return decode_name(accessor_name_of(ref))


def property_name_of(ref: PropertyRef) -> str:
    """Name of the property a reference designates.

    Strings are taken as property names verbatim. Accessor references are
    decoded, with snake_case accessors such as get_name giving "name".

    Args:
        ref: Property name or accessor reference.

    Returns:
        Canonical property name.

    Raises:
        InvalidAccessorName: If an accessor reference cannot be decoded.
    """
    if isinstance(ref, str):
        return ref
    raw = accessor_name_of(ref)
    parsed = parse_accessor(raw)
    if parsed is not None:
        return parsed[1]
    return decode_name(raw)
