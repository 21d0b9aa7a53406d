"""Descriptor resolver, registration decorator and introspection strategies.

Usage:
    @bean
    @dataclass
    class User:
        name: str = ""
        age: int | None = None

        @property
        def display(self) -> str:
            return f"{self.name} ({self.age})"

    descriptor = resolve_type(User)
    descriptor.get("display").can_write   # False
    resolve_attribute(User, "age").annotation   # int | None

Attributes are discovered by several strategies, applied lowest precedence
first; a later strategy only replaces the directions it provides:

    1. plain class annotations (classes that are neither dataclasses nor
       Pydantic models)
    2. dataclass fields, read-only when the dataclass is frozen
    3. Pydantic model fields and computed fields
    4. accessor methods: get_x / getX / is_x readers, set_x writers
    5. property and cached_property objects

A class-level property shadows instance attribute access, so the getattr
and setattr access of strategies 1-3 is dropped for any direction the
property does not provide.
"""

from __future__ import annotations

import functools
import inspect
import logging
import operator
import threading
import typing
import warnings
from collections.abc import Callable, Iterator
from dataclasses import fields, is_dataclass
from typing import Any, ClassVar, overload

from pydantic import BaseModel

from beankit.config import BeanSettings
from beankit.core.accessor import parse_accessor
from beankit.core.descriptor.models import AttributeDescriptor, AttributeSource, TypeDescriptor
from beankit.core.errors import BeanError, IntrospectionFailure, PropertyNotFound

logger = logging.getLogger(__name__)


class DescriptorResolver:
    """Builds and caches TypeDescriptors keyed by type identity.

    Lookups of cached descriptors take no lock. The first resolution of a
    type is serialised, so concurrent callers all observe the same
    descriptor instance. Descriptors are derived purely from the class, so
    the cache may be dropped and rebuilt at any time.
    """

    def __init__(self, settings: BeanSettings | None = None) -> None:
        """Initialize resolver with an empty cache.

        Args:
            settings: Resolution settings. Loaded from the environment when omitted.
        """
        self._settings = settings if settings is not None else BeanSettings()
        self._cache: dict[type, TypeDescriptor] = {}
        self._lock = threading.Lock()

    @property
    def settings(self) -> BeanSettings:
        return self._settings

    def resolve_type(self, bean_type: type) -> TypeDescriptor:
        """Resolve the attribute table of a type.

        Args:
            bean_type: Class to introspect.

        Returns:
            The type's descriptor, cached unless caching is disabled.

        Raises:
            IntrospectionFailure: If bean_type is not a class or cannot be introspected.
        """
        if not isinstance(bean_type, type):
            raise IntrospectionFailure(bean_type, "not a class")
        if not self._settings.cache_descriptors:
            return self._introspect(bean_type)

        descriptor = self._cache.get(bean_type)
        if descriptor is not None:
            return descriptor
        with self._lock:
            descriptor = self._cache.get(bean_type)
            if descriptor is None:
                descriptor = self._introspect(bean_type)
                self._cache[bean_type] = descriptor
        return descriptor

    def resolve_attribute(self, bean_type: type, name: str) -> AttributeDescriptor:
        """Resolve a single attribute by name.

        Args:
            bean_type: Class owning the attribute.
            name: Canonical property name.

        Returns:
            The attribute's descriptor.

        Raises:
            PropertyNotFound: If the type has no attribute with that name.
            IntrospectionFailure: If the type cannot be introspected.
        """
        attribute = self.resolve_type(bean_type).get(name)
        if attribute is None:
            raise PropertyNotFound(bean_type, name)
        return attribute

    def is_cached(self, bean_type: type) -> bool:
        """Check if a descriptor for bean_type is currently cached."""
        return bean_type in self._cache

    def invalidate(self, bean_type: type | None = None) -> None:
        """Drop cached descriptors.

        Args:
            bean_type: Type to forget, or None to clear the whole cache.
        """
        with self._lock:
            if bean_type is None:
                self._cache.clear()
            else:
                self._cache.pop(bean_type, None)
        logger.debug("Invalidated descriptor cache for %s", bean_type or "all types")

    def _introspect(self, bean_type: type) -> TypeDescriptor:
        try:
            attributes = self._collect(bean_type)
        except BeanError:
            raise
        except Exception as e:
            raise IntrospectionFailure(bean_type, f"{type(e).__name__}: {e}") from e

        logger.debug(
            "Resolved %d properties for %s.%s",
            len(attributes),
            bean_type.__module__,
            bean_type.__qualname__,
        )
        return TypeDescriptor(bean_type, attributes)

    def _collect(self, bean_type: type) -> dict[str, AttributeDescriptor]:
        hints = _class_hints(bean_type)
        found: dict[str, AttributeDescriptor] = {}

        strategies = (
            _annotated_attributes(bean_type, hints),
            _dataclass_attributes(bean_type, hints),
            _pydantic_attributes(bean_type),
            _accessor_attributes(bean_type),
            _property_attributes(bean_type),
        )
        for strategy in strategies:
            for attribute in strategy:
                if _is_dunder(attribute.name):
                    continue
                if attribute.name.startswith("_") and not self._settings.include_private:
                    continue
                existing = found.get(attribute.name)
                found[attribute.name] = (
                    attribute if existing is None else existing.merged_with(attribute)
                )
        return found


# Introspection strategies


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _is_pydantic(cls: type) -> bool:
    return issubclass(cls, BaseModel)


def _own_classes(cls: type) -> Iterator[type]:
    """Walk the MRO base-first, skipping object and Pydantic's own classes."""
    for klass in reversed(cls.__mro__):
        if klass is object or klass.__module__.startswith("pydantic"):
            continue
        yield klass


def _class_hints(cls: type) -> dict[str, Any]:
    """Evaluated annotations over the MRO, or the raw ones if they cannot be evaluated."""
    try:
        return typing.get_type_hints(cls, include_extras=True)
    except Exception as e:
        logger.debug("Falling back to raw annotations for %s: %s", cls.__qualname__, e)
        hints: dict[str, Any] = {}
        for klass in _own_classes(cls):
            hints.update(inspect.get_annotations(klass))
        return hints


def _callable_hints(fn: Callable[..., Any]) -> dict[str, Any]:
    try:
        return typing.get_type_hints(fn, include_extras=True)
    except Exception:
        return {}


def _is_class_var(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return annotation is ClassVar or typing.get_origin(annotation) is ClassVar


def _attribute_reader(name: str) -> Callable[[Any], Any]:
    # annotated but never assigned reads as None
    def read(bean: Any) -> Any:
        return getattr(bean, name, None)

    read.__name__ = f"get_{name}"
    return read


def _attribute_writer(name: str) -> Callable[[Any, Any], None]:
    def write(bean: Any, value: Any) -> None:
        setattr(bean, name, value)

    write.__name__ = f"set_{name}"
    return write


def _unshadowed[R, W](cls: type, name: str, read: R, write: W) -> tuple[R | None, W | None]:
    """Drop the directions a class-level property of the same name lacks.

    A property is a data descriptor, so it takes over both getattr and
    setattr on instances even where it has no getter or setter.
    """
    member = inspect.getattr_static(cls, name, None)
    if not isinstance(member, property):
        return read, write
    return (
        read if member.fget is not None else None,
        write if member.fset is not None else None,
    )


def _annotated_attributes(cls: type, hints: dict[str, Any]) -> Iterator[AttributeDescriptor]:
    if is_dataclass(cls) or _is_pydantic(cls):
        return
    for klass in _own_classes(cls):
        for name in inspect.get_annotations(klass):
            annotation = hints.get(name)
            if _is_class_var(annotation):
                continue
            read, write = _unshadowed(cls, name, _attribute_reader(name), _attribute_writer(name))
            yield AttributeDescriptor(
                name=name,
                read=read,
                write=write,
                annotation=annotation,
                source=AttributeSource.ANNOTATION,
            )


def _dataclass_attributes(cls: type, hints: dict[str, Any]) -> Iterator[AttributeDescriptor]:
    if not is_dataclass(cls):
        return
    frozen = cls.__dataclass_params__.frozen  # type: ignore[attr-defined]
    for f in fields(cls):
        annotation = hints.get(f.name, f.type)
        read, write = _unshadowed(
            cls,
            f.name,
            operator.attrgetter(f.name),
            None if frozen else _attribute_writer(f.name),
        )
        yield AttributeDescriptor(
            name=f.name,
            read=read,
            write=write,
            annotation=annotation,
            source=AttributeSource.FIELD,
        )


def _pydantic_attributes(cls: type) -> Iterator[AttributeDescriptor]:
    if not _is_pydantic(cls):
        return
    frozen = bool(cls.model_config.get("frozen", False))
    for name, info in cls.model_fields.items():
        yield AttributeDescriptor(
            name=name,
            read=operator.attrgetter(name),
            write=None if frozen or info.frozen else _attribute_writer(name),
            annotation=info.annotation,
            source=AttributeSource.FIELD,
        )
    for name, computed in cls.model_computed_fields.items():
        yield AttributeDescriptor(
            name=name,
            read=operator.attrgetter(name),
            annotation=computed.return_type,
            source=AttributeSource.FIELD,
        )


def _required_positional(fn: Callable[..., Any]) -> int:
    positional = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    return sum(
        1
        for p in inspect.signature(fn).parameters.values()
        if p.kind in positional and p.default is inspect.Parameter.empty
    )


def _accessor_attributes(cls: type) -> Iterator[AttributeDescriptor]:
    for klass in _own_classes(cls):
        for method_name, member in vars(klass).items():
            if not inspect.isfunction(member):
                continue
            parsed = parse_accessor(method_name)
            if parsed is None:
                continue
            prefix, name = parsed
            arity = _required_positional(member)
            if prefix == "set":
                if arity != 2:
                    continue
                params = list(inspect.signature(member).parameters)
                yield AttributeDescriptor(
                    name=name,
                    write=member,
                    annotation=_callable_hints(member).get(params[1]),
                    source=AttributeSource.ACCESSOR,
                )
            elif arity == 1:
                yield AttributeDescriptor(
                    name=name,
                    read=member,
                    source=AttributeSource.ACCESSOR,
                )


def _property_attributes(cls: type) -> Iterator[AttributeDescriptor]:
    for klass in _own_classes(cls):
        for name, member in vars(klass).items():
            if isinstance(member, property):
                annotation = None
                if member.fset is not None:
                    params = list(inspect.signature(member.fset).parameters)
                    if len(params) > 1:
                        annotation = _callable_hints(member.fset).get(params[1])
                yield AttributeDescriptor(
                    name=name,
                    read=member.fget,
                    write=member.fset,
                    annotation=annotation,
                    source=AttributeSource.PROPERTY,
                )
            elif isinstance(member, functools.cached_property):
                yield AttributeDescriptor(
                    name=name,
                    read=operator.attrgetter(name),
                    write=_attribute_writer(name),
                    annotation=_callable_hints(member.func).get("return"),
                    source=AttributeSource.PROPERTY,
                )


# Module-level resolver instance
_resolver = DescriptorResolver()


def get_resolver() -> DescriptorResolver:
    """Access the process-wide descriptor resolver.

    Returns:
        The resolver used by the module-level functions.
    """
    return _resolver


def configure(settings: BeanSettings) -> DescriptorResolver:
    """Replace the process-wide resolver with one using new settings.

    The previous resolver's cache is discarded along with it.

    Args:
        settings: Settings for the new resolver.

    Returns:
        The new process-wide resolver.
    """
    global _resolver
    _resolver = DescriptorResolver(settings)
    return _resolver


def resolve_type(bean_type: type) -> TypeDescriptor:
    """Resolve a type with the process-wide resolver."""
    return _resolver.resolve_type(bean_type)


def resolve_attribute(bean_type: type, name: str) -> AttributeDescriptor:
    """Resolve one attribute with the process-wide resolver."""
    return _resolver.resolve_attribute(bean_type, name)


@overload
def bean[C: type](cls: C) -> C: ...


@overload
def bean[C: type](
    cls: None = None, *, resolver: DescriptorResolver | None = None
) -> Callable[[C], C]: ...


def bean(
    cls: type | None = None, *, resolver: DescriptorResolver | None = None
) -> type | Callable[[type], type]:
    """Register a class as a bean, resolving its descriptor eagerly.

    Supports two forms:
        @bean                         # bare decorator
        @bean(resolver=my_resolver)   # resolve with a specific resolver

    Apply @bean AFTER @dataclass so the dataclass fields exist.

    Args:
        cls: The class to register, or None if called with arguments.
        resolver: Resolver to register with; the process-wide one by default.

    Returns:
        Decorated class or decorator function.

    Raises:
        IntrospectionFailure: If the class cannot be introspected.
    """

    def decorator(c: type) -> type:
        descriptor = (resolver or get_resolver()).resolve_type(c)
        if not descriptor:
            warnings.warn(
                f"Bean {c.__name__} exposes no properties. "
                f"Did you forget @dataclass or type annotations?",
                stacklevel=3,
            )
        return c

    if cls is None:
        return decorator
    return decorator(cls)
