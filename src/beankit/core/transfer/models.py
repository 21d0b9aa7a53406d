"""Copy options model."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from beankit.core.accessor import PropertyRef, property_name_of


@dataclass(frozen=True, slots=True)
class CopyOptions:
    """Exclusion policy for a single copy.

    Attributes:
        skip_null_source: Leave target attributes alone where the source value is None.
        excluded_names: Property names never copied.
    """

    skip_null_source: bool = False
    excluded_names: frozenset[str] = frozenset()

    @classmethod
    def build(
        cls,
        skip_null_source: bool = False,
        excluded: PropertyRef | Iterable[PropertyRef] = (),
    ) -> CopyOptions:
        """Build options from names and/or accessor references.

        Args:
            skip_null_source: Skip source attributes whose value is None.
            excluded: A property name or accessor, or an iterable of them.

        Returns:
            Options with every exclusion decoded to a property name.

        Raises:
            InvalidAccessorName: If an excluded accessor cannot be decoded.
        """
        if isinstance(excluded, (str, property)) or callable(excluded):
            excluded = (excluded,)
        return cls(
            skip_null_source=skip_null_source,
            excluded_names=frozenset(property_name_of(ref) for ref in excluded),
        )
