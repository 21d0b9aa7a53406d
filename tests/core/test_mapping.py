"""Tests for bean to mapping conversion."""

from dataclasses import dataclass

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import BaseModel

from beankit import (
    BeanSettings,
    ConstructionFailure,
    DescriptorResolver,
    TypeMismatch,
    from_mapping,
    to_mapping,
)


@dataclass
class Order:
    code: str = ""
    quantity: int = 0
    note: str | None = None

    @property
    def summary(self) -> str:
        return f"{self.quantity} x {self.code}"


class Ticket(BaseModel):
    title: str = ""
    points: int = 0


class Vault:
    def __init__(self) -> None:
        self.code = ""

    def set_code(self, code: str) -> None:
        self.code = code


def test_to_mapping_includes_readable_properties():
    order = Order(code="A1", quantity=2)

    assert to_mapping(order) == {
        "code": "A1",
        "quantity": 2,
        "note": None,
        "summary": "2 x A1",
    }


def test_to_mapping_skips_write_only_properties():
    assert to_mapping(Vault()) == {}


def test_to_mapping_unassigned_annotation_is_none():
    class Partial:
        name: str
        age: int

        def __init__(self) -> None:
            self.name = "Ada"

    assert to_mapping(Partial()) == {"name": "Ada", "age": None}


def test_to_mapping_sorted_names():
    resolver = DescriptorResolver(BeanSettings(sort_names=True))

    mapping = to_mapping(Order(code="A1"), resolver=resolver)

    assert list(mapping) == ["code", "note", "quantity", "summary"]


def test_from_mapping_sets_writable_properties():
    order = from_mapping({"code": "B2", "quantity": 5}, Order)

    assert isinstance(order, Order)
    assert (order.code, order.quantity, order.note) == ("B2", 5, None)


def test_from_mapping_ignores_unknown_and_read_only_keys():
    """Loose payloads are accepted, keys without a writable property are dropped."""
    order = from_mapping({"code": "C3", "summary": "ignored", "extra": 1, 7: "x"}, Order)

    assert order.code == "C3"
    assert order.summary == "0 x C3"


def test_from_mapping_through_setter_methods():
    vault = from_mapping({"code": "1234"}, Vault)

    assert vault.code == "1234"


def test_from_mapping_requires_zero_argument_constructor():
    @dataclass
    class NeedsArgs:
        code: str

    with pytest.raises(ConstructionFailure, match="NeedsArgs") as excinfo:
        from_mapping({"code": "x"}, NeedsArgs)

    assert isinstance(excinfo.value.cause, TypeError)


def test_from_mapping_rejects_mismatched_values():
    with pytest.raises(TypeMismatch):
        from_mapping({"quantity": "many"}, Order)


@given(st.text(), st.integers(), st.one_of(st.none(), st.text()))
def test_round_trip(code, quantity, note):
    """from_mapping(to_mapping(b), type(b)) preserves read/write properties."""
    order = Order(code=code, quantity=quantity, note=note)

    assert from_mapping(to_mapping(order), Order) == order


def test_pydantic_round_trip():
    ticket = Ticket(title="Fix login", points=3)

    data = to_mapping(ticket)
    clone = from_mapping(data, Ticket)

    assert data == {"title": "Fix login", "points": 3}
    assert clone == ticket
    assert clone is not ticket
