"""Shared state event bus.

In-process publish/subscribe for the restaurant UI modules. Each bus keeps
its own handlers and a bounded history; buses never see each other's
events.

Usage:

    from shared_state.events import EventType, create_event_bus

    orders_bus = create_event_bus("orders-mfe")

    def handle_status(envelope):
        print(envelope.payload["status"])

    unsubscribe = orders_bus.on_order_status_updated(handle_status)
    orders_bus.emit_order_status_updated("order-123", "READY", "PREPARING")
    unsubscribe()

    # Generic form, for types outside the catalog
    orders_bus.emit("CUSTOM_EVENT", {"data": 1}, target="dashboard-mfe")
    orders_bus.get_history("CUSTOM_EVENT")
"""

from shared_state.events.bus import DEFAULT_HISTORY_SIZE, EventBus
from shared_state.events.catalog import (
    CATALOG,
    CatalogEntry,
    EventType,
    get_catalog_entry,
)
from shared_state.events.factory import create_event_bus
from shared_state.events.models import Envelope
from shared_state.events.restaurant import RestaurantEventBus
from shared_state.events.subscriptions import SubscriptionGroup, subscribed

__all__ = [
    "CATALOG",
    "CatalogEntry",
    "DEFAULT_HISTORY_SIZE",
    "Envelope",
    "EventBus",
    "EventType",
    "RestaurantEventBus",
    "SubscriptionGroup",
    "create_event_bus",
    "get_catalog_entry",
    "subscribed",
]
