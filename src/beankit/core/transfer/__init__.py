"""Bulk copy engine: copy same-named properties between beans."""

from beankit.core.transfer.core import copy_bean, copy_properties, copy_with_options
from beankit.core.transfer.models import CopyOptions

__all__ = [
    # Models
    "CopyOptions",
    # Core
    "copy_bean",
    "copy_properties",
    "copy_with_options",
]
