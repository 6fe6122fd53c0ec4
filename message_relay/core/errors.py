"""Custom exception hierarchy for Message Relay."""


class RelayError(Exception):
    """Base error type."""


class ConfigError(RelayError):
    pass


class PayloadError(RelayError):
    """Raised when an inbound Slack payload is missing required fields."""
    pass


class SlackError(RelayError):
    pass
