"""Unit tests for the event bus factory."""

from unittest.mock import MagicMock

import pytest

from shared_state.configuration import EventBusSettings, Settings
from shared_state.events.factory import create_event_bus
from shared_state.events.restaurant import RestaurantEventBus
from shared_state.services import get_settings

pytestmark = pytest.mark.unit


class TestCreateEventBus:
    """Tests for create_event_bus."""

    def test_returns_restaurant_bus(self):
        """Factory builds catalog-aware buses stamped with the source."""
        bus = create_event_bus("orders-mfe")

        assert isinstance(bus, RestaurantEventBus)
        assert bus.source == "orders-mfe"
        assert bus.get_history() == []
        assert bus.get_registered_events() == []

    def test_default_capacity(self):
        """Buses default to a 100 entry history."""
        assert create_event_bus("orders-mfe").max_history_size == 100

    def test_capacity_from_settings_provider(self, monkeypatch):
        """Without explicit settings the cached settings provider is used."""
        monkeypatch.setenv("EVENT_BUS_HISTORY_SIZE", "12")

        assert create_event_bus("orders-mfe").max_history_size == 12
        assert get_settings().events.HISTORY_SIZE == 12

    def test_capacity_override(self):
        """An explicit capacity wins over settings."""
        assert create_event_bus("orders-mfe", max_history_size=5).max_history_size == 5

    def test_capacity_from_settings(self):
        """Capacity and emit tracing come from the given settings."""
        settings = Settings(
            events=EventBusSettings(EVENT_BUS_HISTORY_SIZE=7, EVENT_BUS_LOG_EMITS=True)
        )

        bus = create_event_bus("orders-mfe", settings=settings)

        assert bus.max_history_size == 7
        assert bus._log_emits is True

    def test_separate_instances(self):
        """Each call returns a new bus."""
        assert create_event_bus("app1") is not create_event_bus("app2")

    def test_same_source_still_isolated(self):
        """Two buses with the same source share nothing."""
        first = create_event_bus("orders-mfe")
        second = create_event_bus("orders-mfe")
        handler = MagicMock()
        second.on("ORDER_CREATED", handler)

        first.emit("ORDER_CREATED", {"order_id": "o1"})

        handler.assert_not_called()
        assert second.get_history() == []

    def test_events_isolated_between_instances(self):
        """A handler on one bus never sees another bus's events."""
        orders = create_event_bus("orders")
        kitchen = create_event_bus("kitchen")
        handler = MagicMock()
        orders.on("ORDER_CREATED", handler)

        kitchen.emit("ORDER_CREATED", {"order_id": "o1"})

        handler.assert_not_called()
        assert orders.get_history() == []
        assert len(kitchen.get_history()) == 1

    def test_isolation_both_directions(self):
        """Identical type strings on two buses stay separate."""
        bus1 = create_event_bus("app1")
        bus2 = create_event_bus("app2")
        handler1 = MagicMock()
        handler2 = MagicMock()
        bus1.on("TEST_EVENT", handler1)
        bus2.on("TEST_EVENT", handler2)

        bus1.emit("TEST_EVENT", {"data": "from-bus1"})

        handler1.assert_called_once()
        handler2.assert_not_called()
