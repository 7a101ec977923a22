"""Shared fixtures for the shared state test suite."""

import pytest

from shared_state.logging import configure_logging
from shared_state.services import get_event_bus, get_settings


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Configure logging once, as a host application would at startup."""
    configure_logging()
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_shared_providers():
    """Drop cached settings and the shared bus around each test."""
    get_settings.cache_clear()
    get_event_bus.cache_clear()
    yield
    get_settings.cache_clear()
    get_event_bus.cache_clear()
