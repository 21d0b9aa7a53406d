"""Accessor-name decoding: getter/setter references to property names."""

from beankit.core.accessor.core import (
    PropertyRef,
    accessor_name_of,
    decode_accessor_name,
    decode_name,
    parse_accessor,
    property_name_of,
)

__all__ = [
    "PropertyRef",
    "accessor_name_of",
    "decode_accessor_name",
    "decode_name",
    "parse_accessor",
    "property_name_of",
]
