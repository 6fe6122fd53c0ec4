"""Input validation utilities for the config commands."""

from __future__ import annotations

import re

SIGNING_SECRET_PATTERN = re.compile(r"^[0-9a-f]{32}$")


def validate_slack_bot_token(token: str) -> tuple[bool, str]:
    """Validate SLACK_BOT_TOKEN format (xoxb-*)."""
    if not token:
        return False, "Token is required"
    if not token.startswith("xoxb-"):
        return False, "Token must start with 'xoxb-'"
    if len(token) < 20:
        return False, "Token appears too short"
    return True, ""


def validate_signing_secret(secret: str) -> tuple[bool, str]:
    """Validate SLACK_SIGNING_SECRET format (32 lowercase hex characters)."""
    if not secret:
        return False, "Signing secret is required"
    if not SIGNING_SECRET_PATTERN.match(secret):
        return False, "Signing secret should be 32 hexadecimal characters"
    return True, ""


def validate_request_url(url: str) -> tuple[bool, str]:
    """Validate the public base URL Slack will post callbacks to."""
    if not url:
        return False, "URL is required"
    if not url.startswith("https://"):
        return False, "Slack only delivers callbacks to https:// URLs"
    if any(char in url for char in (" ", "\n", "\r")):
        return False, "URL contains invalid characters"
    return True, ""


def validate_port(port: str) -> tuple[bool, str]:
    """Validate a TCP port number."""
    if not port:
        return True, ""  # Optional

    if not port.isdigit():
        return False, "Port must be a number"

    if not 0 < int(port) < 65536:
        return False, "Port must be between 1 and 65535"

    return True, ""
