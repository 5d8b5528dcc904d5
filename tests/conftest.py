"""Shared fixtures for the City Metro test suite."""

from __future__ import annotations

import pytest

from city_metro.adapters.graph import SeedNetworkRepository
from city_metro.config import reset_config
from city_metro.graph import TransitGraph


@pytest.fixture(autouse=True)
def fresh_config():
    """Make every test read configuration from its own environment."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def seed_graph() -> TransitGraph:
    """The reference network: City Mall=1, Salon=2, Grocery Store=3,
    Restaurants=4, City Park=5, Stadium=6."""
    return SeedNetworkRepository().load()
