"""Tests for the property access facade."""

from dataclasses import dataclass

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import BaseModel, ConfigDict, Field

from beankit import (
    InvalidAccessorName,
    InvocationFailure,
    PropertyNotFound,
    PropertyNotReadable,
    PropertyNotWritable,
    TypeMismatch,
    get_property,
    has_property,
    set_property,
)
from beankit.core.access import is_readable, is_writable


class Customer:
    """Accessor-method bean with a read-only and a write-only property."""

    def __init__(self) -> None:
        self._name = ""
        self._age = 0
        self._password = ""

    def get_name(self) -> str:
        return self._name

    def set_name(self, name: str) -> None:
        self._name = name

    def get_age(self) -> int:
        return self._age

    def set_age(self, age: int) -> None:
        if age < 0:
            raise ValueError("age must be positive")
        self._age = age

    def set_password(self, password: str) -> None:
        self._password = password

    @property
    def id(self) -> str:
        return f"customer-{self._name}"

    @property
    def broken(self) -> str:
        raise RuntimeError("backend unavailable")

    def describe(self) -> str:
        return self._name


class StrictProfile(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    age: int = 0


@given(st.text())
def test_set_then_get_returns_value(user_cls, value):
    """set_property(b, name, v) then get_property(b, name) returns v."""
    user = user_cls()

    set_property(user, "name", value)

    assert get_property(user, "name") == value


def test_get_and_set_by_name():
    customer = Customer()

    set_property(customer, "name", "Ada")
    set_property(customer, "age", 36)

    assert get_property(customer, "name") == "Ada"
    assert get_property(customer, "age") == 36
    assert get_property(customer, "id") == "customer-Ada"


def test_get_and_set_by_accessor_reference():
    """Getter and setter references are decoded to property names."""
    customer = Customer()

    set_property(customer, Customer.set_name, "Ada")

    assert get_property(customer, Customer.get_name) == "Ada"
    assert get_property(customer, Customer.set_name) == "Ada"
    assert get_property(customer, customer.get_name) == "Ada"


def test_undecodable_accessor_reference_fails():
    with pytest.raises(InvalidAccessorName):
        get_property(Customer(), Customer.describe)


def test_missing_property_fails(user_cls):
    user = user_cls()

    with pytest.raises(PropertyNotFound):
        get_property(user, "missing")
    with pytest.raises(PropertyNotFound):
        set_property(user, "missing", 1)


def test_property_not_found_is_attribute_error(user_cls):
    with pytest.raises(AttributeError):
        get_property(user_cls(), "missing")


def test_read_only_property_not_writable():
    with pytest.raises(PropertyNotWritable, match="'id' of Customer is not writable"):
        set_property(Customer(), "id", "other")


def test_frozen_pydantic_field_not_writable():
    class Ticket(BaseModel):
        code: str = Field("c", frozen=True)

    ticket = Ticket()

    with pytest.raises(PropertyNotWritable, match="'code' of .*Ticket is not writable"):
        set_property(ticket, "code", "x")

    assert ticket.code == "c"


def test_annotated_read_only_property_not_writable():
    class Badge:
        label: str

        @property
        def label(self) -> str:
            return "fixed"

    with pytest.raises(PropertyNotWritable):
        set_property(Badge(), "label", "other")


def test_unassigned_annotation_reads_none():
    class Draft:
        title: str

    assert get_property(Draft(), "title") is None


def test_write_only_property_not_readable():
    customer = Customer()
    set_property(customer, "password", "hunter2")

    with pytest.raises(PropertyNotReadable, match="'password' of Customer is not readable"):
        get_property(customer, "password")


def test_failing_getter_raises_invocation_failure():
    with pytest.raises(InvocationFailure) as excinfo:
        get_property(Customer(), "broken")

    assert isinstance(excinfo.value.cause, RuntimeError)
    assert excinfo.value.__cause__ is excinfo.value.cause
    assert excinfo.value.property_name == "broken"


def test_annotation_mismatch_raises_type_mismatch(user_cls):
    user = user_cls(name="Ada", age=36)

    with pytest.raises(TypeMismatch) as excinfo:
        set_property(user, "age", "thirty")

    assert excinfo.value.cause is None
    assert excinfo.value.value == "thirty"
    assert user.age == 36


def test_no_coercion_even_for_compatible_strings(user_cls):
    """Values are never converted, "36" is not an int."""
    with pytest.raises(TypeMismatch):
        set_property(user_cls(), "age", "36")


def test_type_checks_can_be_disabled(user_cls, lenient_resolver):
    user = user_cls()

    set_property(user, "age", "thirty", resolver=lenient_resolver)

    assert user.age == "thirty"


def test_setter_value_error_raises_type_mismatch():
    with pytest.raises(TypeMismatch) as excinfo:
        set_property(Customer(), "age", -1)

    assert isinstance(excinfo.value.cause, ValueError)
    assert excinfo.value.__cause__ is excinfo.value.cause


def test_pydantic_validation_error_raises_type_mismatch(lenient_resolver):
    profile = StrictProfile()

    with pytest.raises(TypeMismatch) as excinfo:
        set_property(profile, "age", "not a number", resolver=lenient_resolver)

    assert isinstance(excinfo.value.cause, ValueError)
    assert profile.age == 0


def test_type_mismatch_is_type_error(user_cls):
    with pytest.raises(TypeError):
        set_property(user_cls(), "age", "x")


def test_has_property(user_cls):
    user = user_cls()

    assert has_property(user, "name")
    assert not has_property(user, "missing")
    assert has_property(Customer(), Customer.get_age)


def test_readable_and_writable_checks():
    customer = Customer()

    assert is_readable(customer, "id")
    assert not is_writable(customer, "id")
    assert is_writable(customer, "password")
    assert not is_readable(customer, "password")

    with pytest.raises(PropertyNotFound):
        is_readable(customer, "missing")
