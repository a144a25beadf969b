"""
Telegram Bot API implementation of the AdminNotifier port.
"""
import logging

import requests
from asgiref.sync import sync_to_async

from administration.ports.admin_notifier import AdminNotifier

logger = logging.getLogger(__name__)

TELEGRAM_API_BASE = "https://api.telegram.org"


class TelegramNotifier(AdminNotifier):
    """Sends replies with the Bot API ``sendMessage`` method."""

    def __init__(
        self,
        bot_token: str,
        api_base: str = TELEGRAM_API_BASE,
        timeout_seconds: float = 10.0,
        session: requests.Session = None,
    ):
        """
        Initialize the notifier.

        Args:
            bot_token: Bot token issued by BotFather
            api_base: Bot API base URL
            timeout_seconds: HTTP timeout per request
            session: Optional requests session (one is created if omitted)
        """
        if not bot_token:
            raise ValueError("Telegram bot token is required")
        self._url = f"{api_base.rstrip('/')}/bot{bot_token}/sendMessage"
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def _post(self, recipient: str, text: str, markdown: bool) -> None:
        payload = {"chat_id": recipient, "text": text}
        if markdown:
            payload["parse_mode"] = "Markdown"
        response = self.session.post(
            self._url,
            json=payload,
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()

    async def send_message(self, recipient: str, text: str, markdown: bool = True) -> None:
        """
        Send a message to a chat.

        Args:
            recipient: Telegram chat ID
            text: Message body
            markdown: Send with the legacy Markdown parse mode

        Raises:
            requests.RequestException: If delivery fails
        """
        await sync_to_async(self._post, thread_sensitive=False)(recipient, text, markdown)
        logger.debug("Sent admin reply to chat %s", recipient)
