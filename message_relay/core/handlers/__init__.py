"""Handlers invoked by the inbound dispatcher."""

from .events import EventHandlerRegistry, log_event
from .interactions import (
    CONFIRMATION_TEMPLATE,
    FAILURE_NOTICE,
    ShortcutHandler,
    SubmissionHandler,
)

__all__ = [
    "CONFIRMATION_TEMPLATE",
    "FAILURE_NOTICE",
    "EventHandlerRegistry",
    "ShortcutHandler",
    "SubmissionHandler",
    "log_event",
]
