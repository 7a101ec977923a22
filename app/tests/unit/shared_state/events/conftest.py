"""Fixtures for shared state event bus tests."""

import pytest
from unittest.mock import MagicMock

from shared_state.events.bus import EventBus
from shared_state.events.restaurant import RestaurantEventBus


@pytest.fixture
def bus():
    """A fresh generic event bus."""
    return EventBus("test-source")


@pytest.fixture
def restaurant_bus():
    """A fresh catalog event bus."""
    return RestaurantEventBus("test-source")


@pytest.fixture
def mock_event_handler():
    """Mock event handler function."""
    return MagicMock()


@pytest.fixture
def fixed_clock(monkeypatch):
    """Freeze the bus clock at a known millisecond timestamp."""
    timestamp = 1640995200000
    monkeypatch.setattr("shared_state.events.bus._now_ms", lambda: timestamp)
    return timestamp


@pytest.fixture
def order_payload():
    """Payload for ORDER_CREATED events."""
    return {
        "order_id": "order-123",
        "order_number": "ORD-001",
        "customer_id": "customer-456",
        "items": [
            {"menu_item_id": "item-1", "quantity": 2},
            {"menu_item_id": "item-2", "quantity": 1},
        ],
        "total": 45.98,
        "type": "DINE_IN",
    }


@pytest.fixture
def low_stock_payload():
    """Payload for INVENTORY_LOW_STOCK events."""
    return {
        "item_id": "ingredient-123",
        "item_name": "Tomatoes",
        "current_stock": 5,
        "minimum_stock": 20,
        "category": "vegetables",
        "priority": "urgent",
    }


@pytest.fixture
def stock_updated_payload():
    """Payload for INVENTORY_STOCK_UPDATED events."""
    return {
        "item_id": "ingredient-123",
        "item_name": "Tomatoes",
        "previous_stock": 20,
        "new_stock": 15,
        "update_type": "consumption",
        "related_order_id": "order-456",
    }


@pytest.fixture
def reservation_payload():
    """Payload for RESERVATION_CREATED events."""
    return {
        "reservation_id": "res-123",
        "customer_name": "John Doe",
        "party_size": 4,
        "date": "2022-01-15",
        "time": "19:00",
        "table_number": 5,
        "special_requests": "Birthday celebration",
    }
