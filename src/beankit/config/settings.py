"""Configuration settings using Pydantic Settings.

Provides typed configuration for property resolution with environment
variable support.

Usage:
    from beankit.config import BeanSettings

    # Load from environment variables (BEANKIT_*)
    settings = BeanSettings()

    # Or override with explicit values
    settings = BeanSettings(check_types=False, sort_names=True)
"""

from __future__ import annotations

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install beankit"
    ) from e


class BeanSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for descriptor resolution, property access and conversion.

    Attributes:
        check_types: Reject values that do not conform to an attribute's
            declared annotation before writing them (raises TypeMismatch).
        cache_descriptors: Cache type descriptors process-wide. Disable when
            classes are redefined at runtime.
        include_private: Expose underscore-prefixed attributes.
        sort_names: Sort keys of mappings produced by to_mapping.

    Environment Variables:
        BEANKIT_CHECK_TYPES
        BEANKIT_CACHE_DESCRIPTORS
        BEANKIT_INCLUDE_PRIVATE
        BEANKIT_SORT_NAMES
    """

    model_config = SettingsConfigDict(
        env_prefix="BEANKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    check_types: bool = True
    cache_descriptors: bool = True
    include_private: bool = False
    sort_names: bool = False
