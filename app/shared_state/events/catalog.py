"""Restaurant domain event catalog.

The closed set of event types exchanged between the restaurant UI modules,
the payload shape of each, and the module each one is addressed to by
default. The table is pure data; the bus dispatches on the plain string
value of each type.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Literal, Optional, Type, TypedDict, Union

ORDERS_MFE = "orders-mfe"
KITCHEN_MFE = "kitchen-mfe"
DASHBOARD_MFE = "dashboard-mfe"


class EventType(str, Enum):
    """Catalog event names."""

    MENU_ITEM_UPDATED = "MENU_ITEM_UPDATED"
    ORDER_CREATED = "ORDER_CREATED"
    ORDER_STATUS_UPDATED = "ORDER_STATUS_UPDATED"
    KITCHEN_ORDER_UPDATE = "KITCHEN_ORDER_UPDATE"
    INVENTORY_LOW_STOCK = "INVENTORY_LOW_STOCK"
    INVENTORY_STOCK_UPDATED = "INVENTORY_STOCK_UPDATED"
    RESERVATION_CREATED = "RESERVATION_CREATED"
    RESERVATION_UPDATED = "RESERVATION_UPDATED"


OrderType = Literal["DINE_IN", "TAKEOUT", "DELIVERY"]
OrderStatus = Literal[
    "PENDING", "CONFIRMED", "PREPARING", "READY", "COMPLETED", "CANCELLED"
]
KitchenItemStatus = Literal["PENDING", "PREPARING", "READY"]
StockPriority = Literal["urgent", "high", "medium", "low"]
StockUpdateType = Literal["consumption", "delivery", "adjustment", "purchase_order"]
ReservationStatus = Literal["pending", "confirmed", "cancelled", "completed", "noshow"]


class _MenuItemUpdatedRequired(TypedDict):
    item_id: str


class MenuItemUpdatedPayload(_MenuItemUpdatedRequired, total=False):
    available: bool
    price: float
    name: str


class OrderItem(TypedDict):
    menu_item_id: str
    quantity: int


class _OrderCreatedRequired(TypedDict):
    order_id: str
    order_number: str
    items: List[OrderItem]
    total: float
    type: OrderType


class OrderCreatedPayload(_OrderCreatedRequired, total=False):
    customer_id: str


class _OrderStatusUpdatedRequired(TypedDict):
    order_id: str
    status: OrderStatus
    previous_status: str


class OrderStatusUpdatedPayload(_OrderStatusUpdatedRequired, total=False):
    estimated_time: int  # minutes until ready


class KitchenItemState(TypedDict):
    menu_item_id: str
    status: KitchenItemStatus


class KitchenOrderUpdatePayload(TypedDict):
    order_id: str
    item_statuses: List[KitchenItemState]


class InventoryLowStockPayload(TypedDict):
    item_id: str
    item_name: str
    current_stock: float
    minimum_stock: float
    category: str
    priority: StockPriority


class _InventoryStockUpdatedRequired(TypedDict):
    item_id: str
    item_name: str
    previous_stock: float
    new_stock: float
    update_type: StockUpdateType


class InventoryStockUpdatedPayload(_InventoryStockUpdatedRequired, total=False):
    related_order_id: str


class _ReservationCreatedRequired(TypedDict):
    reservation_id: str
    customer_name: str
    party_size: int
    date: str
    time: str


class ReservationCreatedPayload(_ReservationCreatedRequired, total=False):
    table_number: int
    special_requests: str


class _ReservationUpdatesRequired(TypedDict):
    status: ReservationStatus


class ReservationUpdates(_ReservationUpdatesRequired, total=False):
    table_number: int
    party_size: int
    time: str


class ReservationUpdatedPayload(TypedDict):
    reservation_id: str
    updates: ReservationUpdates


@dataclass(frozen=True)
class CatalogEntry:
    """One row of the event catalog."""

    event_type: EventType
    payload_type: Type
    default_target: Optional[str] = None


CATALOG: Dict[EventType, CatalogEntry] = {
    entry.event_type: entry
    for entry in (
        CatalogEntry(EventType.MENU_ITEM_UPDATED, MenuItemUpdatedPayload, ORDERS_MFE),
        CatalogEntry(EventType.ORDER_CREATED, OrderCreatedPayload, KITCHEN_MFE),
        CatalogEntry(EventType.ORDER_STATUS_UPDATED, OrderStatusUpdatedPayload),
        CatalogEntry(
            EventType.KITCHEN_ORDER_UPDATE, KitchenOrderUpdatePayload, ORDERS_MFE
        ),
        CatalogEntry(EventType.INVENTORY_LOW_STOCK, InventoryLowStockPayload),
        CatalogEntry(
            EventType.INVENTORY_STOCK_UPDATED,
            InventoryStockUpdatedPayload,
            KITCHEN_MFE,
        ),
        CatalogEntry(
            EventType.RESERVATION_CREATED, ReservationCreatedPayload, DASHBOARD_MFE
        ),
        CatalogEntry(EventType.RESERVATION_UPDATED, ReservationUpdatedPayload),
    )
}


def get_catalog_entry(event_type: Union[EventType, str]) -> CatalogEntry:
    """Look up the catalog row for an event type.

    Args:
        event_type: Catalog member or its string value.

    Returns:
        The matching CatalogEntry.

    Raises:
        KeyError: If the event type is not part of the catalog.
    """
    try:
        return CATALOG[EventType(event_type)]
    except ValueError:
        raise KeyError(f"Unknown catalog event type: {event_type!r}")
