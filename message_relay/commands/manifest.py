"""Slack app manifest for the relay."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from ..core.models import SEND_MESSAGE_SHORTCUT_ID
from ..server import EVENTS_PATH

BOT_SCOPES = ["chat:write", "commands", "im:write", "users:read"]


def build_manifest(request_url: Optional[str] = None) -> Dict[str, Any]:
    """Return the app manifest; `request_url` is the public base URL of the relay."""
    interactivity: Dict[str, Any] = {"is_enabled": True}
    settings: Dict[str, Any] = {
        "interactivity": interactivity,
        "org_deploy_enabled": False,
        "socket_mode_enabled": False,
        "token_rotation_enabled": False,
    }
    if request_url:
        events_url = request_url.rstrip("/") + EVENTS_PATH
        interactivity["request_url"] = events_url
        settings["event_subscriptions"] = {"request_url": events_url, "bot_events": []}

    return {
        "display_information": {
            "name": "Message Relay",
            "description": "Send a message to a teammate from a shortcut",
            "background_color": "#1a1a2e",
        },
        "features": {
            "bot_user": {
                "display_name": "Message Relay",
                "always_online": True,
            },
            "shortcuts": [
                {
                    "name": "Send a message",
                    "type": "global",
                    "callback_id": SEND_MESSAGE_SHORTCUT_ID,
                    "description": "Pick a user and send them a message",
                },
            ],
        },
        "oauth_config": {"scopes": {"bot": list(BOT_SCOPES)}},
        "settings": settings,
    }


def run_manifest_command(args) -> int:
    print(json.dumps(build_manifest(getattr(args, "request_url", None)), indent=2))
    return 0
