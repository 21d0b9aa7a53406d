"""Tests for the emptiness predicate."""

import pytest

from beankit import is_empty, is_not_empty


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, True),
        ("", True),
        (" ", False),
        ("str", False),
        ([], True),
        ([1], False),
        ((), True),
        ({}, True),
        ({"k": 1}, False),
        (set(), True),
        (b"", True),
        (0, False),
        (False, False),
        (object(), False),
    ],
)
def test_truth_table(value, expected):
    """None and zero-length containers are empty, everything else is not."""
    assert is_empty(value) is expected
    assert is_not_empty(value) is (not expected)


def test_absent_optional_is_none():
    """An absent optional is None, a present one is its value."""
    absent: int | None = None
    present: int | None = 0

    assert is_empty(absent)
    assert is_not_empty(present)
