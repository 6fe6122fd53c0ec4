"""Block Kit views rendered by the relay."""

from __future__ import annotations

from typing import Any, Dict

from slack_sdk.models.blocks import (
    InputBlock,
    PlainTextInputElement,
    PlainTextObject,
    UserSelectElement,
)
from slack_sdk.models.views import View

from .models import (
    MESSAGE_ACTION_ID,
    MESSAGE_BLOCK_ID,
    RECIPIENT_ACTION_ID,
    RECIPIENT_BLOCK_ID,
    SEND_MESSAGE_MODAL_ID,
)

MODAL_TITLE = "Send a Message"
MESSAGE_PLACEHOLDER = "Write something... (Markdown supported)"


def build_send_message_modal() -> Dict[str, Any]:
    """Return the two-field modal (recipient picker + multi-line message)."""
    view = View(
        type="modal",
        callback_id=SEND_MESSAGE_MODAL_ID,
        title=PlainTextObject(text=MODAL_TITLE),
        submit=PlainTextObject(text="Submit"),
        close=PlainTextObject(text="Cancel"),
        blocks=[
            InputBlock(
                block_id=RECIPIENT_BLOCK_ID,
                label=PlainTextObject(text="Select a user"),
                element=UserSelectElement(action_id=RECIPIENT_ACTION_ID),
            ),
            InputBlock(
                block_id=MESSAGE_BLOCK_ID,
                label=PlainTextObject(text="Message"),
                element=PlainTextInputElement(
                    action_id=MESSAGE_ACTION_ID,
                    multiline=True,
                    placeholder=PlainTextObject(text=MESSAGE_PLACEHOLDER),
                ),
            ),
        ],
    )
    return view.to_dict()
