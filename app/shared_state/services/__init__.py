"""
Dependency injection services.

Provides provider functions for application-scoped shared services.
"""

from shared_state.services.providers import (
    get_event_bus,
    get_settings,
)

__all__ = [
    "get_event_bus",
    "get_settings",
]
