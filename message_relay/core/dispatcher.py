"""Routes inbound Slack payloads to handlers."""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple

from ..chat_adapters.i_chat_adapter import IChatAdapter
from .ack import Acknowledgement
from .handlers import EventHandlerRegistry, ShortcutHandler, SubmissionHandler
from .models import (
    SEND_MESSAGE_MODAL_ID,
    SEND_MESSAGE_SHORTCUT_ID,
    DispatchResult,
    PayloadKind,
)

LOGGER = logging.getLogger(__name__)

InteractionHandler = Callable[[Dict[str, Any], Acknowledgement], Awaitable[Any]]
FallbackHandler = Callable[[Dict[str, Any]], Awaitable[None]]
HandlerKey = Tuple[PayloadKind, str]


async def log_unhandled_payload(payload: Dict[str, Any]) -> None:
    LOGGER.warning(
        "No handler registered for payload type %r (callback_id %r)",
        payload.get("type"),
        callback_id_for(payload),
    )


def callback_id_for(payload: Dict[str, Any]) -> Optional[str]:
    """Shortcuts carry callback_id at the top level, view payloads on the view."""
    callback_id = payload.get("callback_id")
    if callback_id:
        return callback_id
    view = payload.get("view")
    if isinstance(view, dict):
        return view.get("callback_id")
    return None


class InboundDispatcher:
    """Single entry point for every callback Slack posts to the relay.

    Errors never escape `dispatch`: they are logged and turned into a status
    code. Once a handler has acknowledged, the result is always 200.
    """

    def __init__(
        self,
        chat_adapter: IChatAdapter,
        event_handlers: Optional[EventHandlerRegistry] = None,
        fallback: Optional[FallbackHandler] = None,
    ) -> None:
        self._shortcut_handler = ShortcutHandler(chat_adapter)
        self._submission_handler = SubmissionHandler(chat_adapter)
        self._event_handlers = event_handlers or EventHandlerRegistry()
        self._fallback: FallbackHandler = fallback or log_unhandled_payload
        self._interaction_handlers: Dict[HandlerKey, InteractionHandler] = {
            (PayloadKind.SHORTCUT, SEND_MESSAGE_SHORTCUT_ID): self._shortcut_handler.handle,
            (PayloadKind.VIEW_SUBMISSION, SEND_MESSAGE_MODAL_ID): self._submission_handler.handle,
        }

    def resolve(self, payload: Dict[str, Any]) -> Optional[InteractionHandler]:
        kind = PayloadKind.from_payload(payload)
        callback_id = callback_id_for(payload)
        if callback_id is None:
            return None
        return self._interaction_handlers.get((kind, callback_id))

    async def dispatch(
        self,
        payload: Dict[str, Any],
        ack: Optional[Acknowledgement] = None,
    ) -> DispatchResult:
        kind = PayloadKind.from_payload(payload)
        if kind is PayloadKind.URL_VERIFICATION:
            return DispatchResult(body={"challenge": payload.get("challenge")})

        LOGGER.debug("Received Slack payload: %s", payload)

        if kind is PayloadKind.EVENT_CALLBACK:
            try:
                await self._event_handlers.handle(payload)
            except Exception:
                LOGGER.exception("Error processing event")
                return DispatchResult(status_code=500)
            return DispatchResult()

        handler = self.resolve(payload)
        if handler is None:
            try:
                await self._fallback(payload)
            except Exception:
                LOGGER.exception("Error processing payload of kind %s", kind.value)
                return DispatchResult(status_code=500)
            return DispatchResult()

        ack = ack or Acknowledgement()
        try:
            await handler(payload, ack)
        except Exception:
            LOGGER.exception("Unhandled error in %s handler", kind.value)
            if not ack.acked:
                return DispatchResult(status_code=500)
        return DispatchResult(body=ack.body)
