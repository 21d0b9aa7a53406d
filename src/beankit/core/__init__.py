"""Core functionalities: property resolution, access, copy and conversion.

Architecture Note:
    Everything in core/ is stateless apart from the process-wide descriptor
    cache held by the default DescriptorResolver. Bean instances are never
    owned or locked here; callers synchronise access to shared beans.
"""

from beankit.core.access import (
    get_property,
    has_property,
    is_readable,
    is_writable,
    read_attribute,
    set_property,
    write_attribute,
)
from beankit.core.accessor import (
    PropertyRef,
    accessor_name_of,
    decode_accessor_name,
    decode_name,
    parse_accessor,
    property_name_of,
)
from beankit.core.descriptor import (
    AttributeDescriptor,
    AttributeSource,
    DescriptorResolver,
    TypeDescriptor,
    bean,
    configure,
    conforms,
    get_resolver,
    resolve_attribute,
    resolve_type,
)
from beankit.core.emptiness import is_empty, is_not_empty
from beankit.core.errors import (
    BeanError,
    ConstructionFailure,
    IntrospectionFailure,
    InvalidAccessorName,
    InvocationFailure,
    PropertyNotFound,
    PropertyNotReadable,
    PropertyNotWritable,
    TypeMismatch,
)
from beankit.core.mapping import from_mapping, to_mapping
from beankit.core.transfer import CopyOptions, copy_bean, copy_properties, copy_with_options

__all__ = [
    # Emptiness
    "is_empty",
    "is_not_empty",
    # Accessor
    "PropertyRef",
    "accessor_name_of",
    "decode_accessor_name",
    "decode_name",
    "parse_accessor",
    "property_name_of",
    # Descriptor
    "AttributeDescriptor",
    "AttributeSource",
    "TypeDescriptor",
    "DescriptorResolver",
    "bean",
    "configure",
    "conforms",
    "get_resolver",
    "resolve_attribute",
    "resolve_type",
    # Access
    "get_property",
    "set_property",
    "has_property",
    "is_readable",
    "is_writable",
    "read_attribute",
    "write_attribute",
    # Transfer
    "CopyOptions",
    "copy_bean",
    "copy_properties",
    "copy_with_options",
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
