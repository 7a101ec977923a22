"""Factory for isolated event bus instances."""

from typing import Optional

from shared_state.configuration import Settings
from shared_state.events.restaurant import RestaurantEventBus
from shared_state.logging import get_module_logger

logger = get_module_logger()


def create_event_bus(
    source: str,
    max_history_size: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> RestaurantEventBus:
    """Create a new event bus for one UI module.

    Every call returns a fresh bus with its own handlers and history, even
    when called twice with the same source.

    Args:
        source: Identifier stamped on every envelope the bus emits.
        max_history_size: History capacity. Defaults to
            settings.events.HISTORY_SIZE.
        settings: Settings to read defaults from. Defaults to the cached
            get_settings() provider.

    Returns:
        A new RestaurantEventBus.
    """
    if settings is None:
        from shared_state.services.providers import get_settings

        settings = get_settings()
    capacity = (
        max_history_size
        if max_history_size is not None
        else settings.events.HISTORY_SIZE
    )
    bus = RestaurantEventBus(
        source=source,
        max_history_size=capacity,
        log_emits=settings.events.LOG_EMITS,
    )
    logger.debug("created_event_bus", source=source, max_history_size=capacity)
    return bus
