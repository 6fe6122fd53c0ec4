"""Shortcut and modal-submission handlers for the send-message workflow."""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Dict, Optional

from ...chat_adapters.i_chat_adapter import IChatAdapter
from ..models import ModalSubmission, ShortcutInvocation, SubmissionOutcome, sender_id
from ..views import build_send_message_modal

LOGGER = logging.getLogger(__name__)

AckFn = Callable[..., Awaitable[None]]

CONFIRMATION_TEMPLATE = "Your message has been sent to <@{recipient}>."
FAILURE_NOTICE = "There was an error sending your message. Please try again later."


class ShortcutHandler:
    """Opens the send-message modal when the global shortcut is invoked."""

    def __init__(self, chat_adapter: IChatAdapter) -> None:
        self._chat_adapter = chat_adapter

    async def handle(self, payload: Dict[str, Any], ack: AckFn) -> None:
        await ack()
        try:
            invocation = ShortcutInvocation.from_payload(payload)
            await self._chat_adapter.open_modal(
                invocation.trigger_id, build_send_message_modal()
            )
        except Exception:
            LOGGER.exception("Error opening modal")
            return
        LOGGER.info("Modal opened successfully for user %s", invocation.user_id)


class SubmissionHandler:
    """Relays a submitted message to its recipient and confirms to the sender.

    The two sends are sequential and not transactional. If either fails, the
    sender gets one best-effort failure notice.
    """

    def __init__(self, chat_adapter: IChatAdapter) -> None:
        self._chat_adapter = chat_adapter

    async def handle(self, payload: Dict[str, Any], ack: AckFn) -> SubmissionOutcome:
        await ack()
        delivered = False
        try:
            submission = ModalSubmission.from_payload(payload)
            await self._chat_adapter.send_message(submission.recipient_id, submission.text)
            delivered = True
            await self._chat_adapter.send_message(
                submission.user_id,
                CONFIRMATION_TEMPLATE.format(recipient=submission.recipient_id),
            )
        except Exception:
            LOGGER.exception("Error handling modal submission")
            await self._notify_failure(sender_id(payload))
            return SubmissionOutcome.PARTIAL_FAILURE if delivered else SubmissionOutcome.FAILED

        LOGGER.info(
            "Message sent successfully from %s to %s",
            submission.user_id,
            submission.recipient_id,
        )
        return SubmissionOutcome.DELIVERED

    async def _notify_failure(self, user_id: Optional[str]) -> None:
        if not user_id:
            LOGGER.warning("Cannot notify sender of failure: no user id in payload")
            return
        try:
            await self._chat_adapter.send_message(user_id, FAILURE_NOTICE)
        except Exception:
            LOGGER.exception("Failed to notify %s of the send failure", user_id)
