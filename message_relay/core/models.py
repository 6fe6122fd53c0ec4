"""Domain models for Message Relay."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from .errors import PayloadError

SEND_MESSAGE_SHORTCUT_ID = "send_message_shortcut"
SEND_MESSAGE_MODAL_ID = "send_message_modal"

RECIPIENT_BLOCK_ID = "user_select"
RECIPIENT_ACTION_ID = "selected_user"
MESSAGE_BLOCK_ID = "message_input"
MESSAGE_ACTION_ID = "message"


class PayloadKind(str, Enum):
    URL_VERIFICATION = "url_verification"
    EVENT_CALLBACK = "event_callback"
    SHORTCUT = "shortcut"
    VIEW_SUBMISSION = "view_submission"
    UNKNOWN = "unknown"

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "PayloadKind":
        if payload.get("type") == cls.URL_VERIFICATION.value:
            return cls.URL_VERIFICATION
        if "event" in payload:
            return cls.EVENT_CALLBACK
        try:
            return cls(payload.get("type"))
        except ValueError:
            return cls.UNKNOWN


class SubmissionOutcome(str, Enum):
    DELIVERED = "delivered"
    PARTIAL_FAILURE = "partial_failure"
    FAILED = "failed"


@dataclass(frozen=True)
class ShortcutInvocation:
    trigger_id: str
    user_id: Optional[str] = None
    callback_id: str = SEND_MESSAGE_SHORTCUT_ID

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ShortcutInvocation":
        """Only trigger_id is required to open the modal; the user is informational."""
        return cls(
            trigger_id=_require(payload.get("trigger_id"), "trigger_id"),
            user_id=_user_id(payload),
            callback_id=payload.get("callback_id") or SEND_MESSAGE_SHORTCUT_ID,
        )


@dataclass(frozen=True)
class ModalSubmission:
    user_id: str
    recipient_id: str
    text: str

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ModalSubmission":
        """Extract the sender, recipient and message from a view_submission body.

        Raises:
            PayloadError: if any of the three values is missing or empty.
        """
        user_id = _require(_user_id(payload), "user.id")
        values = ((payload.get("view") or {}).get("state") or {}).get("values") or {}
        recipient_id = _require(
            _input_value(values, RECIPIENT_BLOCK_ID, RECIPIENT_ACTION_ID, "selected_user"),
            f"{RECIPIENT_BLOCK_ID}.{RECIPIENT_ACTION_ID}",
        )
        text = _require(
            _input_value(values, MESSAGE_BLOCK_ID, MESSAGE_ACTION_ID, "value"),
            f"{MESSAGE_BLOCK_ID}.{MESSAGE_ACTION_ID}",
        )
        return cls(user_id=user_id, recipient_id=recipient_id, text=text)


@dataclass(frozen=True)
class DispatchResult:
    """HTTP-level answer for one inbound payload."""

    status_code: int = 200
    body: Optional[Dict[str, Any]] = field(default=None)


def sender_id(payload: Dict[str, Any]) -> Optional[str]:
    """Best-effort lookup of the acting user's id."""
    return _user_id(payload)


def _user_id(payload: Dict[str, Any]) -> Optional[str]:
    user = payload.get("user")
    if isinstance(user, dict):
        return user.get("id")
    return None


def _input_value(
    values: Dict[str, Any], block_id: str, action_id: str, key: str
) -> Optional[str]:
    block = values.get(block_id)
    if not isinstance(block, dict):
        return None
    action = block.get(action_id)
    if not isinstance(action, dict):
        return None
    return action.get(key)


def _require(value: Any, name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise PayloadError(f"Missing required field: {name}")
    return value
