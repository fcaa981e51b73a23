"""Root conftest — shared test configuration."""

import os

import pytest

from users_service.config import Settings, get_settings

# Ensure tests don't pick up a developer's USERS_* overrides
for _key in [k for k in os.environ if k.upper().startswith("USERS_")]:
    del os.environ[_key]


@pytest.fixture(autouse=True)
def _fresh_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings.create_default()
