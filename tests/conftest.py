"""Shared fixtures for all tests."""

import random

import pytest

from entity_attributes.config import get_settings
from entity_attributes.core import AttributeCatalog, AttributeContainer, build_default_catalog


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Give every test fresh settings, unaffected by the developer's environment."""
    for name in (
        "ENTITY_ATTRIBUTES_NAMESPACE",
        "ENTITY_ATTRIBUTES_CATALOG_PATH",
        "ENTITY_ATTRIBUTES_RANDOM_SEED",
        "ENTITY_ATTRIBUTES_LOG_LEVEL",
        "ENTITY_ATTRIBUTES_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def catalog() -> AttributeCatalog:
    """Catalog with the eleven default attribute kinds."""
    return build_default_catalog()


@pytest.fixture
def container(catalog: AttributeCatalog) -> AttributeContainer:
    """Attribute container for a player supporting every default kind."""
    return AttributeContainer(catalog, entity_id="player")


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible rolls."""
    return random.Random(1234)
