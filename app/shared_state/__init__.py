"""Cross-module state sharing for the restaurant UI modules."""

from shared_state.events import (
    Envelope,
    EventBus,
    EventType,
    RestaurantEventBus,
    create_event_bus,
)
from shared_state.services import get_event_bus

__all__ = [
    "Envelope",
    "EventBus",
    "EventType",
    "RestaurantEventBus",
    "create_event_bus",
    "get_event_bus",
]
