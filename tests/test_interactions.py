"""Tests for the shortcut and modal-submission handlers."""

from __future__ import annotations

import pytest

from message_relay.core.errors import SlackError
from message_relay.core.handlers import (
    CONFIRMATION_TEMPLATE,
    FAILURE_NOTICE,
    ShortcutHandler,
    SubmissionHandler,
)
from message_relay.core.models import SubmissionOutcome

from .fakes import DummyChatAdapter, shortcut_payload, submission_payload


class TestShortcutHandler:
    """Shortcut path: ack, then exactly one modal-open call."""

    @pytest.mark.asyncio
    async def test_opens_modal_with_trigger_id(self, chat_adapter, recording_ack, calls):
        handler = ShortcutHandler(chat_adapter)

        await handler.handle(shortcut_payload(trigger_id="T123"), recording_ack)

        assert calls[0] == ("ack", None)
        assert len(chat_adapter.modals) == 1
        trigger_id, view = chat_adapter.modals[0]
        assert trigger_id == "T123"
        assert view["callback_id"] == "send_message_modal"

    @pytest.mark.asyncio
    async def test_view_has_two_input_blocks(self, chat_adapter, recording_ack):
        handler = ShortcutHandler(chat_adapter)

        await handler.handle(shortcut_payload(), recording_ack)

        _, view = chat_adapter.modals[0]
        blocks = view["blocks"]
        assert [block["type"] for block in blocks] == ["input", "input"]
        assert blocks[0]["element"]["type"] == "users_select"
        assert blocks[1]["element"]["type"] == "plain_text_input"
        assert blocks[1]["element"]["multiline"] is True

    @pytest.mark.asyncio
    async def test_modal_error_is_logged_not_raised(self, calls, recording_ack, caplog):
        adapter = DummyChatAdapter(calls=calls, modal_error=SlackError("expired_trigger_id"))
        handler = ShortcutHandler(adapter)

        await handler.handle(shortcut_payload(), recording_ack)

        assert calls[0] == ("ack", None)
        assert len(adapter.modals) == 1
        assert "Error opening modal" in caplog.text

    @pytest.mark.asyncio
    async def test_shortcut_without_user_still_opens_modal(self, chat_adapter, recording_ack):
        payload = shortcut_payload(trigger_id="T55")
        del payload["user"]
        handler = ShortcutHandler(chat_adapter)

        await handler.handle(payload, recording_ack)

        assert [trigger for trigger, _ in chat_adapter.modals] == ["T55"]

    @pytest.mark.asyncio
    async def test_missing_trigger_id_skips_modal(self, chat_adapter, recording_ack, calls):
        payload = shortcut_payload()
        del payload["trigger_id"]
        handler = ShortcutHandler(chat_adapter)

        await handler.handle(payload, recording_ack)

        assert calls == [("ack", None)]


class TestSubmissionHandler:
    """Submission path: ack, send to recipient, confirm to sender."""

    @pytest.mark.asyncio
    async def test_sends_message_then_confirmation(self, chat_adapter, recording_ack):
        handler = SubmissionHandler(chat_adapter)

        outcome = await handler.handle(submission_payload("U2", "hi", "U1"), recording_ack)

        assert outcome is SubmissionOutcome.DELIVERED
        assert chat_adapter.sends == [
            ("U2", "hi"),
            ("U1", "Your message has been sent to <@U2>."),
        ]

    @pytest.mark.asyncio
    async def test_ack_precedes_every_send(self, chat_adapter, recording_ack, calls):
        handler = SubmissionHandler(chat_adapter)

        await handler.handle(submission_payload(), recording_ack)

        assert [call[0] for call in calls] == ["ack", "send_message", "send_message"]

    @pytest.mark.asyncio
    async def test_multiline_text_is_relayed_verbatim(self, chat_adapter, recording_ack):
        text = "  line one\n*bold* line two  "
        handler = SubmissionHandler(chat_adapter)

        await handler.handle(submission_payload("U2", text, "U1"), recording_ack)

        assert chat_adapter.sends[0] == ("U2", text)

    @pytest.mark.asyncio
    async def test_recipient_failure_notifies_sender_once(self, calls, recording_ack):
        adapter = DummyChatAdapter(calls=calls, fail_sends={0})
        handler = SubmissionHandler(adapter)

        outcome = await handler.handle(submission_payload("U2", "hi", "U1"), recording_ack)

        assert outcome is SubmissionOutcome.FAILED
        assert adapter.sends == [("U2", "hi"), ("U1", FAILURE_NOTICE)]

    @pytest.mark.asyncio
    async def test_confirmation_failure_is_partial(self, calls, recording_ack):
        adapter = DummyChatAdapter(calls=calls, fail_sends={1})
        handler = SubmissionHandler(adapter)

        outcome = await handler.handle(submission_payload("U2", "hi", "U1"), recording_ack)

        assert outcome is SubmissionOutcome.PARTIAL_FAILURE
        assert adapter.sends == [
            ("U2", "hi"),
            ("U1", CONFIRMATION_TEMPLATE.format(recipient="U2")),
            ("U1", FAILURE_NOTICE),
        ]

    @pytest.mark.asyncio
    async def test_failed_notification_is_not_escalated(self, calls, recording_ack, caplog):
        adapter = DummyChatAdapter(calls=calls, fail_sends={0, 1})
        handler = SubmissionHandler(adapter)

        outcome = await handler.handle(submission_payload("U2", "hi", "U1"), recording_ack)

        assert outcome is SubmissionOutcome.FAILED
        assert len(adapter.sends) == 2
        assert "Failed to notify U1" in caplog.text

    @pytest.mark.asyncio
    async def test_missing_recipient_notifies_sender(self, chat_adapter, recording_ack):
        handler = SubmissionHandler(chat_adapter)

        outcome = await handler.handle(submission_payload(recipient=None), recording_ack)

        assert outcome is SubmissionOutcome.FAILED
        assert chat_adapter.sends == [("U1", FAILURE_NOTICE)]

    @pytest.mark.asyncio
    async def test_unknown_sender_gets_no_notice(self, chat_adapter, recording_ack, calls):
        handler = SubmissionHandler(chat_adapter)

        outcome = await handler.handle(submission_payload(user_id=None), recording_ack)

        assert outcome is SubmissionOutcome.FAILED
        assert calls == [("ack", None)]
