"""Emptiness predicate shared by callers and the copy engine.

Usage:
    is_empty(None)      # True
    is_empty("")        # True
    is_empty(" ")       # False
    is_empty({})        # True
    is_not_empty([1])   # True

An absent optional value is None; a present one is the value itself.
"""

from __future__ import annotations

from collections.abc import Sized
from typing import Any


def is_empty(value: Any) -> bool:
    """Classify a value as empty.

    Args:
        value: Any value.

    Returns:
        True for None and for any sized value (strings, bytes, sequences,
        sets, mappings) of length zero. False otherwise, including for
        zero and False.
    """
    if value is None:
        return True
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def is_not_empty(value: Any) -> bool:
    """Negation of :func:`is_empty`."""
    return not is_empty(value)
