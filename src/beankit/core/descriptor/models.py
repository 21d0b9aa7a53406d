"""Descriptor models: per-attribute and per-type metadata.

Accessors stored here are unbound: read(bean) returns the value and
write(bean, value) assigns it.
"""

from __future__ import annotations

import types
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import (
    Annotated,
    Any,
    ForwardRef,
    Literal,
    TypeAliasType,
    TypeVar,
    Union,
    get_args,
    get_origin,
)


class AttributeSource(Enum):
    """Where an attribute was discovered on its type."""

    ANNOTATION = auto()  # Plain class annotation
    FIELD = auto()  # Dataclass or Pydantic field
    ACCESSOR = auto()  # get_x / set_x / is_x methods
    PROPERTY = auto()  # property or cached_property


_UNION_ORIGINS = (Union, types.UnionType)


def conforms(value: Any, annotation: Any) -> bool:
    """Check a value against a declared annotation without coercing it.

    Unknown or unresolved annotations (None, Any, strings, type variables)
    accept everything. Parametrised generics are checked against their
    origin only, so list[int] accepts any list.

    Args:
        value: Value about to be written.
        annotation: Declared type of the attribute.

    Returns:
        True if the value may be written.
    """
    if annotation is None or annotation is Any:
        return True
    if isinstance(annotation, (str, ForwardRef, TypeVar)):
        return True
    if isinstance(annotation, TypeAliasType):
        return conforms(value, annotation.__value__)
    if annotation is type(None):
        return value is None

    origin = get_origin(annotation)
    if origin is Annotated:
        return conforms(value, get_args(annotation)[0])
    if origin in _UNION_ORIGINS:
        return any(conforms(value, arg) for arg in get_args(annotation))
    if origin is Literal:
        return value in get_args(annotation)
    if origin is not None:
        annotation = origin

    # Numeric tower: int is acceptable where float or complex is declared
    if annotation is float:
        return isinstance(value, (int, float))
    if annotation is complex:
        return isinstance(value, (int, float, complex))
    if not isinstance(annotation, type):
        return True
    try:
        return isinstance(value, annotation)
    except TypeError:
        # Not checkable at runtime, e.g. a non runtime_checkable Protocol
        return True


@dataclass(frozen=True, slots=True)
class AttributeDescriptor:
    """Resolved metadata for one attribute of one type.

    Attributes:
        name: Canonical property name.
        read: Unbound read accessor, or None when write-only.
        write: Unbound write accessor, or None when read-only.
        annotation: Declared type used to check written values, or None.
        source: Strategy that contributed the attribute last.
    """

    name: str
    read: Callable[[Any], Any] | None = None
    write: Callable[[Any, Any], None] | None = None
    annotation: Any = None
    source: AttributeSource = AttributeSource.ANNOTATION

    @property
    def can_read(self) -> bool:
        return self.read is not None

    @property
    def can_write(self) -> bool:
        return self.write is not None

    def accepts(self, value: Any) -> bool:
        """Check whether value conforms to this attribute's annotation."""
        return conforms(value, self.annotation)

    def merged_with(self, other: AttributeDescriptor) -> AttributeDescriptor:
        """Overlay another descriptor of the same name onto this one.

        Only the directions other provides replace ours, so a read-only
        property combined with a setter method stays writable.

        Args:
            other: Descriptor from a higher precedence strategy.

        Returns:
            The combined descriptor.
        """
        return replace(
            self,
            read=other.read if other.read is not None else self.read,
            write=other.write if other.write is not None else self.write,
            annotation=other.annotation if other.annotation is not None else self.annotation,
            source=other.source,
        )


@dataclass(frozen=True)
class TypeDescriptor:
    """Attribute table for one type. Iterates over attribute names.

    Name order is whatever introspection produced and carries no meaning.
    """

    bean_type: type
    attributes: Mapping[str, AttributeDescriptor]

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", types.MappingProxyType(dict(self.attributes)))

    def __contains__(self, name: object) -> bool:
        return name in self.attributes

    def __iter__(self) -> Iterator[str]:
        return iter(self.attributes)

    def __len__(self) -> int:
        return len(self.attributes)

    def get(self, name: str) -> AttributeDescriptor | None:
        """Look up an attribute, returning None when absent."""
        return self.attributes.get(name)

    def names(self) -> frozenset[str]:
        return frozenset(self.attributes)

    def readable(self) -> tuple[AttributeDescriptor, ...]:
        """Attributes with a read accessor."""
        return tuple(a for a in self.attributes.values() if a.can_read)

    def writable(self) -> tuple[AttributeDescriptor, ...]:
        """Attributes with a write accessor."""
        return tuple(a for a in self.attributes.values() if a.can_write)
