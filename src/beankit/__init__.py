"""beankit: property access, bulk copy and mapping conversion for Python beans.

Usage:
    from dataclasses import dataclass
    from beankit import bean, copy_properties, get_property, to_mapping

    @bean
    @dataclass
    class User:
        name: str = ""
        age: int | None = None

    a = User("Ada", 36)
    b = User("Bob", None)

    copy_properties(b, a, skip_null_source=True)
    get_property(a, "name")     # "Bob"
    get_property(a, "age")      # 36
    to_mapping(a)               # {"name": "Bob", "age": 36}
"""

__version__ = "0.1.0"

# Configuration
from beankit.config import BeanSettings

# Core primitives
from beankit.core import (
    AttributeDescriptor,
    AttributeSource,
    BeanError,
    ConstructionFailure,
    CopyOptions,
    DescriptorResolver,
    IntrospectionFailure,
    InvalidAccessorName,
    InvocationFailure,
    PropertyNotFound,
    PropertyNotReadable,
    PropertyNotWritable,
    PropertyRef,
    TypeDescriptor,
    TypeMismatch,
    bean,
    configure,
    copy_bean,
    copy_properties,
    decode_accessor_name,
    from_mapping,
    get_property,
    get_resolver,
    has_property,
    is_empty,
    is_not_empty,
    set_property,
    to_mapping,
)

__all__ = [
    # Version
    "__version__",
    # Config
    "BeanSettings",
    # Emptiness
    "is_empty",
    "is_not_empty",
    # Accessor
    "PropertyRef",
    "decode_accessor_name",
    # Descriptor
    "AttributeDescriptor",
    "AttributeSource",
    "TypeDescriptor",
    "DescriptorResolver",
    "bean",
    "configure",
    "get_resolver",
    # Access
    "get_property",
    "set_property",
    "has_property",
    # Transfer
    "CopyOptions",
    "copy_bean",
    "copy_properties",
    # Mapping
    "from_mapping",
    "to_mapping",
    # Errors
    "BeanError",
    "InvalidAccessorName",
    "PropertyNotFound",
    "PropertyNotReadable",
    "PropertyNotWritable",
    "IntrospectionFailure",
    "InvocationFailure",
    "TypeMismatch",
    "ConstructionFailure",
]
