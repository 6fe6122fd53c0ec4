"""Acknowledgement handle passed to interaction handlers."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

LOGGER = logging.getLogger(__name__)


class Acknowledgement:
    """Awaitable `ack()` that tells Slack the callback was received.

    Slack expects an acknowledgement within three seconds, so handlers call it
    before doing any outbound work. The HTTP layer waits on `wait()` and
    answers as soon as it fires.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self.body: Optional[Dict[str, Any]] = None

    async def __call__(self, body: Optional[Dict[str, Any]] = None) -> None:
        if self._event.is_set():
            LOGGER.debug("Ignoring repeated acknowledgement")
            return
        self.body = body
        self._event.set()

    @property
    def acked(self) -> bool:
        return self._event.is_set()

    async def wait(self) -> None:
        await self._event.wait()
