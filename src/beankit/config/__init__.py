"""Configuration module using Pydantic Settings.

Usage:
    from beankit.config import BeanSettings

    settings = BeanSettings(sort_names=True)
"""

from beankit.config.settings import BeanSettings

__all__ = [
    "BeanSettings",
]
