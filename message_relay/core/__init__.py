"""Core domain logic for Message Relay."""

from .ack import Acknowledgement
from .config import Config, load_config
from .dispatcher import InboundDispatcher
from .errors import ConfigError, PayloadError, RelayError, SlackError
from .models import (
    DispatchResult,
    ModalSubmission,
    PayloadKind,
    ShortcutInvocation,
    SubmissionOutcome,
)

__all__ = [
    "Acknowledgement",
    "Config",
    "load_config",
    "InboundDispatcher",
    "RelayError",
    "ConfigError",
    "PayloadError",
    "SlackError",
    "DispatchResult",
    "ModalSubmission",
    "PayloadKind",
    "ShortcutInvocation",
    "SubmissionOutcome",
]
