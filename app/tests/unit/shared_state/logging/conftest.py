"""Fixtures for shared_state.logging tests."""

import pytest
from unittest.mock import Mock

from shared_state.configuration import Settings


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.is_production = False
    return settings
