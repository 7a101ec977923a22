"""Scoped subscriptions.

Helpers that tie a handler registration to a block of code or an owner
object, guaranteeing the matching unsubscribe runs when the scope ends.

Usage:
    with subscribed(bus, EventType.ORDER_CREATED, handle_order):
        run_kitchen_screen()

    group = SubscriptionGroup(bus)
    group.on(EventType.ORDER_CREATED, handle_order)
    group.add(bus.on_inventory_low_stock(show_alert))
    ...
    group.close()
"""

from contextlib import contextmanager
from typing import Iterator, List

from shared_state.events.bus import EventBus, EventHandler, EventTypeKey, Unsubscribe


@contextmanager
def subscribed(
    bus: EventBus, event_type: EventTypeKey, handler: EventHandler
) -> Iterator[Unsubscribe]:
    """Register handler for the duration of the with block."""
    unsubscribe = bus.on(event_type, handler)
    try:
        yield unsubscribe
    finally:
        unsubscribe()


class SubscriptionGroup:
    """Collects subscriptions on one bus and releases them together."""

    def __init__(self, bus: EventBus):
        self.bus = bus
        self._unsubscribers: List[Unsubscribe] = []

    def __len__(self) -> int:
        return len(self._unsubscribers)

    def __enter__(self) -> "SubscriptionGroup":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def on(self, event_type: EventTypeKey, handler: EventHandler) -> Unsubscribe:
        return self.add(self.bus.on(event_type, handler))

    def add(self, unsubscribe: Unsubscribe) -> Unsubscribe:
        """Track an unsubscribe returned by on() or a catalog listener."""
        self._unsubscribers.append(unsubscribe)
        return unsubscribe

    def close(self) -> None:
        """Unsubscribe everything in the group. Safe to call repeatedly."""
        unsubscribers, self._unsubscribers = self._unsubscribers, []
        for unsubscribe in reversed(unsubscribers):
            unsubscribe()
