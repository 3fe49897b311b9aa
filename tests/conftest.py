"""Shared fixtures for fastapi_hal tests."""

import pytest

from fastapi_hal.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings around every test so env overrides stay local."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
