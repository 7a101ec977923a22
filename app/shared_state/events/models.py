"""Event models for the shared state event bus.

Provides the Envelope wrapped around every emitted event.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass
class Envelope:
    """Record of one emitted event, as delivered to handlers and kept in history."""

    type: str
    """The event type tag (e.g., 'ORDER_CREATED')."""

    payload: Any
    """Event data, structured per catalog entry and opaque to the bus."""

    timestamp: int
    """Milliseconds since the epoch, assigned when the event was emitted."""

    source: str
    """Source identifier of the bus that emitted the event."""

    target: Optional[str] = None
    """Intended consumer module. Informational only, never used for routing."""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize envelope to dictionary.

        Returns:
            Dictionary representation of the envelope.
        """
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Envelope":
        """Deserialize envelope from dictionary.

        Args:
            data: Dictionary with envelope fields.

        Returns:
            Envelope instance.

        Raises:
            ValueError: If required fields are missing or invalid.
        """
        try:
            timestamp = data["timestamp"]
            if isinstance(timestamp, bool) or not isinstance(timestamp, int):
                raise ValueError(f"timestamp must be an integer, got {timestamp!r}")

            return cls(
                type=data["type"],
                payload=data.get("payload"),
                timestamp=timestamp,
                source=data["source"],
                target=data.get("target"),
            )
        except (KeyError, ValueError) as e:
            raise ValueError(f"Invalid envelope data: {e}")
