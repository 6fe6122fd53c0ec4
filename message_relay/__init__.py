"""Message Relay - Slack shortcut that relays a message to another user."""

__version__ = "0.1.0"
