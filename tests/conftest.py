"""Root conftest — shared test configuration."""

import os

import pytest

# Tests run against the documented defaults, whatever the developer's .env says
os.environ.setdefault("SEED_DATA", "true")
os.environ.setdefault("LOG_FORMAT", "json")


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are lru_cached; clear around each test so env patches apply."""
    from kitchen.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
