"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for shared services.
"""

from functools import lru_cache

from shared_state.configuration import Settings
from shared_state.events import RestaurantEventBus, create_event_bus


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_event_bus() -> RestaurantEventBus:
    """
    Get the application-wide shared event bus.

    Built on first use with source settings.events.GLOBAL_SOURCE ("global"
    by default) and kept for the life of the process. It is independent of
    every bus made by create_event_bus; reset it with clear().

    Usage:
        bus = get_event_bus()
        bus.on_inventory_low_stock(show_low_stock_alert)

    Returns:
        RestaurantEventBus: The shared bus.
    """
    settings = get_settings()
    return create_event_bus(settings.events.GLOBAL_SOURCE, settings=settings)
