"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass

from beankit import BeanSettings, DescriptorResolver, bean


@pytest.fixture
def resolver():
    """Fresh resolver with default settings and an empty cache."""
    return DescriptorResolver(BeanSettings())


@pytest.fixture
def lenient_resolver():
    """Resolver that writes values without checking annotations."""
    return DescriptorResolver(BeanSettings(check_types=False))


@bean
@dataclass
class FixtureUser:
    name: str | None = None
    age: int | None = None


@bean
@dataclass
class FixtureAccount:
    name: str | None = None
    age: int | None = None
    email: str = ""


@pytest.fixture(scope="session")
def user_cls():
    return FixtureUser


@pytest.fixture(scope="session")
def account_cls():
    return FixtureAccount
