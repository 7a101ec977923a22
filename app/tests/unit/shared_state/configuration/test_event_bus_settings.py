"""Unit tests for shared_state.configuration settings.

Tests cover:
- EventBusSettings defaults and environment overrides
- Settings aggregation and production detection
"""

import pytest
from pydantic import ValidationError

from shared_state.configuration import EventBusSettings, Settings

pytestmark = pytest.mark.unit


class TestEventBusSettings:
    """Test suite for EventBusSettings configuration."""

    def test_defaults(self):
        """Test EventBusSettings uses correct default values."""
        events = EventBusSettings()

        assert events.HISTORY_SIZE == 100
        assert events.GLOBAL_SOURCE == "global"
        assert events.LOG_EMITS is False

    def test_custom_values(self, monkeypatch):
        """Test EventBusSettings reads environment variables."""
        monkeypatch.setenv("EVENT_BUS_HISTORY_SIZE", "250")
        monkeypatch.setenv("EVENT_BUS_GLOBAL_SOURCE", "shell")
        monkeypatch.setenv("EVENT_BUS_LOG_EMITS", "true")

        events = EventBusSettings()

        assert events.HISTORY_SIZE == 250
        assert events.GLOBAL_SOURCE == "shell"
        assert events.LOG_EMITS is True

    @pytest.mark.parametrize("value", ["0", "-5"])
    def test_history_size_must_be_positive(self, monkeypatch, value):
        """Test non-positive capacities are rejected."""
        monkeypatch.setenv("EVENT_BUS_HISTORY_SIZE", value)

        with pytest.raises(ValidationError):
            EventBusSettings()


class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_events_section_created(self):
        """Test Settings instantiates the events section automatically."""
        settings = Settings()

        assert isinstance(settings.events, EventBusSettings)

    def test_events_section_override(self):
        """Test an explicit events section is kept."""
        events = EventBusSettings(EVENT_BUS_HISTORY_SIZE=10)

        settings = Settings(events=events)

        assert settings.events.HISTORY_SIZE == 10

    def test_is_production_without_prefix(self, monkeypatch):
        """Test empty PREFIX means production."""
        monkeypatch.setenv("PREFIX", "")

        assert Settings().is_production is True

    def test_is_not_production_with_prefix(self, monkeypatch):
        """Test a PREFIX marks a non-production environment."""
        monkeypatch.setenv("PREFIX", "dev-")

        assert Settings().is_production is False

    def test_log_level(self, monkeypatch):
        """Test LOG_LEVEL is read from the environment."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        assert Settings().LOG_LEVEL == "DEBUG"
