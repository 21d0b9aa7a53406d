"""Bean to mapping conversion and back."""

from beankit.core.mapping.core import from_mapping, to_mapping

__all__ = [
    "from_mapping",
    "to_mapping",
]
