"""
AdminNotifier port (interface).

Delivers reply text to an operator on the channel the command came from.
"""
from abc import ABC, abstractmethod


class AdminNotifier(ABC):
    """Abstract outbound channel to operators."""

    @abstractmethod
    async def send_message(self, recipient: str, text: str, markdown: bool = True) -> None:
        """
        Send a message to an operator.

        Args:
            recipient: Channel-specific recipient identity (e.g. chat ID)
            text: Message body
            markdown: Whether ``text`` is Markdown-formatted
        """
        pass
