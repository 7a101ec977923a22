"""Event bus infrastructure settings."""

from pydantic import Field

from shared_state.configuration.base import InfrastructureSettings


class EventBusSettings(InfrastructureSettings):
    """Event bus configuration.

    Environment Variables:
        EVENT_BUS_HISTORY_SIZE: Envelopes kept in each bus history (default: 100)
        EVENT_BUS_GLOBAL_SOURCE: Source identifier of the shared bus (default: "global")
        EVENT_BUS_LOG_EMITS: Debug-log every emit and registration (default: False)

    Example:
        ```python
        from shared_state.services import get_settings

        settings = get_settings()

        capacity = settings.events.HISTORY_SIZE
        ```
    """

    HISTORY_SIZE: int = Field(
        default=100,
        gt=0,
        alias="EVENT_BUS_HISTORY_SIZE",
        description="Maximum number of envelopes kept in a bus history buffer",
    )
    GLOBAL_SOURCE: str = Field(
        default="global",
        alias="EVENT_BUS_GLOBAL_SOURCE",
        description="Source identifier stamped on envelopes from the shared bus",
    )
    LOG_EMITS: bool = Field(
        default=False,
        alias="EVENT_BUS_LOG_EMITS",
        description="Emit a debug log record for every emit and registration",
    )
