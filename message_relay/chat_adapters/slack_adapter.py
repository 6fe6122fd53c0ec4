"""Slack adapter using the official Slack SDK."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from slack_sdk.errors import SlackApiError
from slack_sdk.web.async_client import AsyncWebClient

from .i_chat_adapter import IChatAdapter
from ..core.errors import SlackError

LOGGER = logging.getLogger(__name__)


class SlackAdapter(IChatAdapter):
    def __init__(
        self,
        bot_token: Optional[str] = None,
        web_client: Optional[AsyncWebClient] = None,
    ) -> None:
        if web_client is None and not bot_token:
            raise ValueError("SlackAdapter needs a bot_token or a web_client")
        self._web_client = web_client or AsyncWebClient(token=bot_token)

    async def open_modal(self, trigger_id: str, view: Dict[str, Any]) -> Optional[str]:
        try:
            response = await self._web_client.views_open(trigger_id=trigger_id, view=view)
        except SlackApiError as exc:
            raise SlackError(f"Failed to open Slack modal: {exc}") from exc
        opened = response.get("view") or {}
        return opened.get("id")

    async def send_message(self, channel: str, text: str) -> Optional[str]:
        try:
            response = await self._web_client.chat_postMessage(channel=channel, text=text)
        except SlackApiError as exc:
            raise SlackError(f"Failed to send Slack message: {exc}") from exc
        return response.get("ts")

    async def close(self) -> None:
        session = getattr(self._web_client, "session", None)
        if session is not None and not session.closed:
            await session.close()
