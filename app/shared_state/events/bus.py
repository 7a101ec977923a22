"""Event bus core for the shared state package.

Provides a per-instance publish/subscribe engine. Each EventBus owns its
handler registry and a bounded history of recently emitted envelopes;
nothing is shared between instances. Handlers are called synchronously,
in registration order, before emit returns.
"""

import time
from collections import deque
from enum import Enum
from threading import RLock
from typing import Callable, Deque, Dict, List, Optional, Union

from shared_state.events.models import Envelope
from shared_state.logging import get_module_logger

logger = get_module_logger()

DEFAULT_HISTORY_SIZE = 100

EventHandler = Callable[[Envelope], None]
Unsubscribe = Callable[[], None]
EventTypeKey = Union[str, Enum]


def _now_ms() -> int:
    return int(time.time() * 1000)


def _type_key(event_type: EventTypeKey) -> str:
    if isinstance(event_type, Enum):
        return str(event_type.value)
    return event_type


class _Registration:
    """A single on() call. Identity distinguishes duplicate handlers."""

    __slots__ = ("handler",)

    def __init__(self, handler: EventHandler):
        self.handler = handler


class EventBus:
    """In-process event bus with a bounded history buffer.

    Usage:
        bus = EventBus("orders-mfe")

        unsubscribe = bus.on("ORDER_CREATED", handle_order_created)
        bus.emit("ORDER_CREATED", {"order_id": "o1"}, target="kitchen-mfe")
        unsubscribe()

    A handler that raises is logged and skipped; the remaining handlers
    still receive the envelope and emit never raises delivery errors.

    Handlers run while the bus lock is held. A handler may use its own bus
    freely, but handlers on two buses that emit into each other from
    different threads at the same time can deadlock.
    """

    def __init__(
        self,
        source: str = "unknown",
        max_history_size: int = DEFAULT_HISTORY_SIZE,
        log_emits: bool = False,
    ):
        if max_history_size < 1:
            raise ValueError(
                f"max_history_size must be at least 1, got {max_history_size}"
            )
        self._source = source
        self._max_history_size = max_history_size
        self._log_emits = log_emits
        self._handlers: Dict[str, List[_Registration]] = {}
        self._history: Deque[Envelope] = deque(maxlen=max_history_size)
        self._last_timestamp = 0
        self._lock = RLock()
        self._log = logger.bind(source=source)

    @property
    def source(self) -> str:
        return self._source

    @property
    def max_history_size(self) -> int:
        return self._max_history_size

    def __repr__(self) -> str:
        return f"{type(self).__name__}(source={self._source!r})"

    def emit(
        self,
        event_type: EventTypeKey,
        payload=None,
        target: Optional[str] = None,
    ) -> None:
        """Record an event and deliver it to every handler for its type.

        Handlers registered when the call starts are invoked in registration
        order. Registrations made or removed by a handler during dispatch
        only affect later emits.

        Args:
            event_type: The event type tag.
            payload: Event data, passed through untouched.
            target: Optional hint naming the intended consumer module.
        """
        key = _type_key(event_type)
        with self._lock:
            envelope = Envelope(
                type=key,
                payload=payload,
                timestamp=self._next_timestamp(),
                source=self._source,
                target=target,
            )
            self._history.append(envelope)
            registrations = list(self._handlers.get(key, ()))

            if self._log_emits:
                self._log.debug(
                    "event_emitted",
                    event_type=key,
                    target=target,
                    handler_count=len(registrations),
                )

            for registration in registrations:
                self._invoke(registration.handler, envelope)

    def on(self, event_type: EventTypeKey, handler: EventHandler) -> Unsubscribe:
        """Register a handler for an event type.

        Args:
            event_type: The event type to handle.
            handler: Callable receiving the Envelope.

        Returns:
            Function that removes exactly this registration. Calling it
            again is a no-op.

        Raises:
            TypeError: If handler is not callable.
        """
        if not callable(handler):
            raise TypeError(f"handler must be callable, got {handler!r}")

        key = _type_key(event_type)
        registration = _Registration(handler)
        with self._lock:
            self._handlers.setdefault(key, []).append(registration)
            if self._log_emits:
                self._log.debug(
                    "registered_event_handler",
                    handler=getattr(handler, "__name__", "unknown"),
                    event_type=key,
                    total_handlers=len(self._handlers[key]),
                )

        def unsubscribe() -> None:
            self._remove_registration(key, registration)

        return unsubscribe

    def off(self, event_type: EventTypeKey, handler: EventHandler) -> None:
        """Remove the oldest registration of handler for an event type.

        No-op if the handler is not registered for that type.
        """
        key = _type_key(event_type)
        with self._lock:
            registrations = self._handlers.get(key)
            if not registrations:
                return
            for registration in registrations:
                if registration.handler == handler:
                    self._remove_registration(key, registration)
                    return

    def clear(self) -> None:
        """Remove all handlers and history from this bus."""
        with self._lock:
            self._handlers.clear()
            self._history.clear()
        self._log.debug("cleared_event_bus")

    def get_history(self, event_type: Optional[EventTypeKey] = None) -> List[Envelope]:
        """Get recorded envelopes in emission order.

        Args:
            event_type: If given, only envelopes of exactly this type. Only
                None means all types; "" matches envelopes typed "".

        Returns:
            A new list; mutating it does not affect the bus.
        """
        with self._lock:
            if event_type is None:
                return list(self._history)
            key = _type_key(event_type)
            return [envelope for envelope in self._history if envelope.type == key]

    def get_registered_events(self) -> List[str]:
        """Get event types that currently have at least one handler."""
        with self._lock:
            return list(self._handlers.keys())

    def get_handlers_for_event(self, event_type: EventTypeKey) -> List[EventHandler]:
        """Get handlers for an event type in registration order."""
        with self._lock:
            return [r.handler for r in self._handlers.get(_type_key(event_type), ())]

    def handler_count(self, event_type: Optional[EventTypeKey] = None) -> int:
        """Count registrations for one event type, or for all types."""
        with self._lock:
            if event_type is not None:
                return len(self._handlers.get(_type_key(event_type), ()))
            return sum(len(registrations) for registrations in self._handlers.values())

    def log_registered_handlers(self) -> None:
        """Log all registered event handlers for visibility."""
        with self._lock:
            handlers_by_event = {
                event_type: [
                    getattr(r.handler, "__name__", "unknown") for r in registrations
                ]
                for event_type, registrations in self._handlers.items()
            }

        if not handlers_by_event:
            self._log.warning("no_event_handlers_registered")
            return

        for event_type in sorted(handlers_by_event.keys()):
            handler_names = handlers_by_event[event_type]
            self._log.info(
                "event_handlers_registered",
                event_type=event_type,
                handler_count=len(handler_names),
                handlers=", ".join(handler_names),
            )

    def _next_timestamp(self) -> int:
        # Clamped so a clock stepping backwards never reorders history.
        timestamp = max(_now_ms(), self._last_timestamp)
        self._last_timestamp = timestamp
        return timestamp

    def _remove_registration(self, key: str, registration: _Registration) -> None:
        with self._lock:
            registrations = self._handlers.get(key)
            if not registrations:
                return
            for index, candidate in enumerate(registrations):
                if candidate is registration:
                    del registrations[index]
                    break
            if not registrations:
                del self._handlers[key]

    def _invoke(self, handler: EventHandler, envelope: Envelope) -> None:
        try:
            handler(envelope)
        except Exception as e:
            self._log.error(
                "event_handler_failed",
                handler=getattr(handler, "__name__", "unknown"),
                event_type=envelope.type,
                error=str(e),
            )
