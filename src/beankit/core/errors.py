"""Error taxonomy for property resolution, access, copy and conversion.

Every error is raised immediately and chained to its underlying cause where
there is one. Nothing here is retried, logged or swallowed.
"""

from __future__ import annotations

from typing import Any


class BeanError(Exception):
    """Base class for all beankit errors."""

    pass


class InvalidAccessorName(BeanError, ValueError):
    """Raised when an accessor name has no get/set/is prefix."""

    def __init__(self, raw_name: str, reason: str | None = None) -> None:
        self.raw_name = raw_name
        message = f"Invalid getter, setter or is-accessor name: {raw_name!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class _PropertyError(BeanError):
    """Common base for errors tied to one attribute of one type."""

    _template = "Property '{name}' of {type_name}"

    def __init__(self, bean_type: type, property_name: str) -> None:
        self.bean_type = bean_type
        self.property_name = property_name
        super().__init__(
            self._template.format(name=property_name, type_name=bean_type.__qualname__)
        )


class PropertyNotFound(_PropertyError, AttributeError):
    """Raised when a type has no attribute with the requested name."""

    _template = "Property '{name}' not found on {type_name}"


class PropertyNotReadable(_PropertyError, AttributeError):
    """Raised when reading a write-only attribute."""

    _template = "Property '{name}' of {type_name} is not readable"


class PropertyNotWritable(_PropertyError, AttributeError):
    """Raised when writing a read-only attribute."""

    _template = "Property '{name}' of {type_name} is not writable"


class IntrospectionFailure(BeanError, TypeError):
    """Raised when a type's attribute set cannot be discovered at all."""

    def __init__(self, bean_type: Any, reason: str) -> None:
        self.bean_type = bean_type
        super().__init__(f"Cannot introspect {bean_type!r}: {reason}")


class InvocationFailure(BeanError):
    """Raised when an accessor itself fails while being invoked.

    Attributes:
        cause: The exception raised by the accessor.
    """

    def __init__(self, bean_type: type, property_name: str, cause: BaseException) -> None:
        self.bean_type = bean_type
        self.property_name = property_name
        self.cause = cause
        super().__init__(
            f"Accessor for '{property_name}' of {bean_type.__qualname__} failed: "
            f"{type(cause).__name__}: {cause}"
        )


class TypeMismatch(BeanError, TypeError):
    """Raised when a value does not fit the attribute it is written to.

    Attributes:
        cause: The exception raised by the write accessor, or None when the
            value was rejected by the annotation check before writing.
    """

    def __init__(
        self,
        bean_type: type,
        property_name: str,
        value: Any,
        cause: BaseException | None = None,
        expected: Any = None,
    ) -> None:
        self.bean_type = bean_type
        self.property_name = property_name
        self.value = value
        self.cause = cause
        self.expected = expected
        detail = f"expected {expected!r}" if cause is None else f"{type(cause).__name__}: {cause}"
        super().__init__(
            f"Cannot assign {type(value).__name__} value to '{property_name}' "
            f"of {bean_type.__qualname__}: {detail}"
        )


class ConstructionFailure(BeanError, TypeError):
    """Raised when a type cannot be built with zero arguments.

    Attributes:
        cause: The exception raised by the constructor.
    """

    def __init__(self, bean_type: Any, cause: BaseException) -> None:
        self.bean_type = bean_type
        self.cause = cause
        name = getattr(bean_type, "__qualname__", repr(bean_type))
        super().__init__(f"Cannot construct {name} without arguments: {cause}")
