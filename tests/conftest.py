"""Shared pytest fixtures for lazywire tests."""

import pytest

from tests.fakes import AsyncDictResolver, CountingFactory, DictResolver


@pytest.fixture()
def resolver() -> DictResolver:
    """Empty sync resolver; tests register factories on ``resolver.factories``."""
    return DictResolver()


@pytest.fixture()
def async_resolver() -> AsyncDictResolver:
    """Empty resolver with ``aresolve`` support."""
    return AsyncDictResolver()


@pytest.fixture()
def counting_factory() -> CountingFactory:
    """Factory that counts its invocations."""
    return CountingFactory()
