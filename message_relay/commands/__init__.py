"""Commands module for the message-relay CLI."""

from .config_slack import run_config_slack_command
from .manifest import run_manifest_command

__all__ = [
    "run_config_slack_command",
    "run_manifest_command",
]
