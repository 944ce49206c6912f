"""Synchronous in-process event dispatcher."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any, Protocol

logger = logging.getLogger(__name__)

Handler = Callable[[Any], None]


class Dispatcher(Protocol):
    """Anything handlers can be registered on by event class."""

    def listen(self, event_type: type, handler: Handler) -> None: ...


class EventDispatcher:
    """Calls registered handlers on the firing thread, in registration order.

    Handlers are keyed by the exact event class; a handler failure
    propagates to the caller of ``dispatch``.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Handler]] = defaultdict(list)

    def listen(self, event_type: type, handler: Handler) -> None:
        """Register a handler for an event class."""
        self._listeners[event_type].append(handler)

    def has_listeners(self, event_type: type) -> bool:
        return bool(self._listeners.get(event_type))

    def dispatch(self, event: Any) -> int:
        """Fire an event, returning the number of handlers called."""
        handlers = list(self._listeners.get(type(event), ()))
        logger.debug("Dispatching %s to %d handler(s)", type(event).__name__, len(handlers))
        for handler in handlers:
            handler(event)
        return len(handlers)


__all__ = ["Dispatcher", "EventDispatcher", "Handler"]
