"""Typed emit/listen helpers for the restaurant event catalog.

Each helper is a thin wrapper over EventBus.emit / EventBus.on using the
catalog's type name and default target; they add no delivery logic.
"""

from typing import Callable, List, Optional

from shared_state.events.bus import EventBus, Unsubscribe
from shared_state.events.catalog import (
    EventType,
    InventoryLowStockPayload,
    InventoryStockUpdatedPayload,
    KitchenItemState,
    MenuItemUpdatedPayload,
    OrderCreatedPayload,
    OrderStatus,
    OrderStatusUpdatedPayload,
    ReservationCreatedPayload,
    ReservationUpdates,
    get_catalog_entry,
)
from shared_state.events.models import Envelope

CatalogHandler = Callable[[Envelope], None]


class RestaurantEventBus(EventBus):
    """EventBus with one emit/on helper pair per catalog event.

    Usage:
        bus = RestaurantEventBus("kitchen-mfe")

        bus.on_order_created(handle_new_order)
        bus.emit_order_status_updated("order-123", "PREPARING", "CONFIRMED", 15)
    """

    def _emit_catalog(self, event_type: EventType, payload) -> None:
        entry = get_catalog_entry(event_type)
        self.emit(entry.event_type, payload, entry.default_target)

    # Emitters

    def emit_menu_item_updated(
        self,
        item_id: str,
        available: Optional[bool] = None,
        price: Optional[float] = None,
        name: Optional[str] = None,
    ) -> None:
        """Announce a menu item change. Only the given fields are included."""
        payload: MenuItemUpdatedPayload = {"item_id": item_id}
        if available is not None:
            payload["available"] = available
        if price is not None:
            payload["price"] = price
        if name is not None:
            payload["name"] = name
        self._emit_catalog(EventType.MENU_ITEM_UPDATED, payload)

    def emit_order_created(self, order: OrderCreatedPayload) -> None:
        self._emit_catalog(EventType.ORDER_CREATED, order)

    def emit_order_status_updated(
        self,
        order_id: str,
        status: OrderStatus,
        previous_status: str,
        estimated_time: Optional[int] = None,
    ) -> None:
        payload: OrderStatusUpdatedPayload = {
            "order_id": order_id,
            "status": status,
            "previous_status": previous_status,
        }
        if estimated_time is not None:
            payload["estimated_time"] = estimated_time
        self._emit_catalog(EventType.ORDER_STATUS_UPDATED, payload)

    def emit_kitchen_order_update(
        self, order_id: str, item_statuses: List[KitchenItemState]
    ) -> None:
        self._emit_catalog(
            EventType.KITCHEN_ORDER_UPDATE,
            {"order_id": order_id, "item_statuses": item_statuses},
        )

    def emit_inventory_low_stock(self, payload: InventoryLowStockPayload) -> None:
        self._emit_catalog(EventType.INVENTORY_LOW_STOCK, payload)

    def emit_inventory_stock_updated(
        self, payload: InventoryStockUpdatedPayload
    ) -> None:
        self._emit_catalog(EventType.INVENTORY_STOCK_UPDATED, payload)

    def emit_reservation_created(self, payload: ReservationCreatedPayload) -> None:
        self._emit_catalog(EventType.RESERVATION_CREATED, payload)

    def emit_reservation_updated(
        self, reservation_id: str, updates: ReservationUpdates
    ) -> None:
        self._emit_catalog(
            EventType.RESERVATION_UPDATED,
            {"reservation_id": reservation_id, "updates": updates},
        )

    # Listeners

    def on_menu_item_updated(self, handler: CatalogHandler) -> Unsubscribe:
        return self.on(EventType.MENU_ITEM_UPDATED, handler)

    def on_order_created(self, handler: CatalogHandler) -> Unsubscribe:
        return self.on(EventType.ORDER_CREATED, handler)

    def on_order_status_updated(self, handler: CatalogHandler) -> Unsubscribe:
        return self.on(EventType.ORDER_STATUS_UPDATED, handler)

    def on_kitchen_order_update(self, handler: CatalogHandler) -> Unsubscribe:
        return self.on(EventType.KITCHEN_ORDER_UPDATE, handler)

    def on_inventory_low_stock(self, handler: CatalogHandler) -> Unsubscribe:
        return self.on(EventType.INVENTORY_LOW_STOCK, handler)

    def on_inventory_stock_updated(self, handler: CatalogHandler) -> Unsubscribe:
        return self.on(EventType.INVENTORY_STOCK_UPDATED, handler)

    def on_reservation_created(self, handler: CatalogHandler) -> Unsubscribe:
        return self.on(EventType.RESERVATION_CREATED, handler)

    def on_reservation_updated(self, handler: CatalogHandler) -> Unsubscribe:
        return self.on(EventType.RESERVATION_UPDATED, handler)
