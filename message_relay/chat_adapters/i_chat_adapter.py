"""Chat adapter abstraction."""

from __future__ import annotations

import abc
from typing import Any, Dict, Optional


class IChatAdapter(abc.ABC):
    """Outbound calls the relay makes against a chat platform."""

    @abc.abstractmethod
    async def open_modal(self, trigger_id: str, view: Dict[str, Any]) -> Optional[str]:
        """Render a modal in response to a user action.

        Returns:
            The platform's view ID if available, None otherwise.
        """

    @abc.abstractmethod
    async def send_message(self, channel: str, text: str) -> Optional[str]:
        """Post a message to a channel or user (DM).

        Returns:
            The message timestamp/ID if available, None otherwise.
        """

    async def close(self) -> None:
        """Release any transport resources held by the adapter."""
