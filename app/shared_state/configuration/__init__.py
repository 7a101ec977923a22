"""Shared state configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    Settings: Main settings class (for testing/overrides)
    EventBusSettings: Event bus settings class (for testing)

Example:
    ```python
    from shared_state.services import get_settings

    settings = get_settings()
    capacity = settings.events.HISTORY_SIZE
    ```
"""

from shared_state.configuration.settings import Settings
from shared_state.configuration.events import EventBusSettings

__all__ = ["Settings", "EventBusSettings"]
