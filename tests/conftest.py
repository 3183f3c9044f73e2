"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Callable, Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

from geoql.database import EntityStore, ReferentialPolicy, create_store


@pytest.fixture
def store() -> EntityStore:
    """A freshly seeded store using the default referential policy."""
    return create_store()


@pytest.fixture
def make_info() -> Callable[[EntityStore], Any]:
    """Build a mock GraphQL info object whose context carries the given store."""

    def _make(target: EntityStore) -> Any:
        info = MagicMock(spec=strawberry.Info)
        info.context = {"store": target}
        return info

    return _make


@pytest.fixture
def mock_info(store: EntityStore, make_info: Callable[[EntityStore], Any]) -> Any:
    return make_info(store)


@pytest.fixture
def cascade_store() -> EntityStore:
    return create_store(referential_policy=ReferentialPolicy.CASCADE)


@pytest.fixture
def restrict_store() -> EntityStore:
    return create_store(referential_policy=ReferentialPolicy.RESTRICT)


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
