"""Event API callbacks (`event_callback` envelopes)."""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional

LOGGER = logging.getLogger(__name__)

EventHandler = Callable[[Dict[str, Any], Dict[str, Any]], Awaitable[None]]


async def log_event(event: Dict[str, Any], body: Dict[str, Any]) -> None:
    LOGGER.info("Received %s event", event.get("type"))


class EventHandlerRegistry:
    """Maps Slack event types to handlers; unknown types use the default."""

    def __init__(
        self,
        handlers: Optional[Mapping[str, EventHandler]] = None,
        default: EventHandler = log_event,
    ) -> None:
        self._handlers: Dict[str, EventHandler] = dict(handlers or {})
        self._default = default

    def register(self, event_type: str, handler: EventHandler) -> None:
        self._handlers[event_type] = handler

    def resolve(self, event_type: Optional[str]) -> EventHandler:
        if event_type is None:
            return self._default
        return self._handlers.get(event_type, self._default)

    async def handle(self, body: Dict[str, Any]) -> None:
        event = body.get("event")
        if not isinstance(event, dict):
            event = {}
        handler = self.resolve(event.get("type"))
        await handler(event, body)
