"""Descriptor functionality: models, resolver, registration decorator."""

from beankit.core.descriptor.core import (
    DescriptorResolver,
    bean,
    configure,
    get_resolver,
    resolve_attribute,
    resolve_type,
)
from beankit.core.descriptor.models import (
    AttributeDescriptor,
    AttributeSource,
    TypeDescriptor,
    conforms,
)

__all__ = [
    # Models
    "AttributeDescriptor",
    "AttributeSource",
    "TypeDescriptor",
    "conforms",
    # Core
    "DescriptorResolver",
    "bean",
    "configure",
    "get_resolver",
    "resolve_attribute",
    "resolve_type",
]
