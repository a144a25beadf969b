"""
Unit tests for the Telegram notifier.
"""
import pytest
import requests

from administration.infrastructure.telegram_notifier import TelegramNotifier


class _Response:
    def __init__(self, status_code=200):
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class _Session:
    def __init__(self, response):
        self.response = response
        self.calls = []

    def post(self, url, json=None, timeout=None):
        self.calls.append((url, json, timeout))
        return self.response


class TestTelegramNotifier:
    """Tests for TelegramNotifier."""

    def test_requires_token(self):
        """Test a bot token is mandatory."""
        with pytest.raises(ValueError, match="token is required"):
            TelegramNotifier("")

    @pytest.mark.asyncio
    async def test_send_message(self):
        """Test sendMessage request shape."""
        session = _Session(_Response())
        notifier = TelegramNotifier("123:abc", session=session, timeout_seconds=5)

        await notifier.send_message("4242", "hello")

        assert session.calls == [
            (
                "https://api.telegram.org/bot123:abc/sendMessage",
                {"chat_id": "4242", "text": "hello", "parse_mode": "Markdown"},
                5,
            )
        ]

    @pytest.mark.asyncio
    async def test_http_error_raised(self):
        """Test delivery failures propagate."""
        notifier = TelegramNotifier("123:abc", session=_Session(_Response(502)))
        with pytest.raises(requests.HTTPError):
            await notifier.send_message("4242", "hello")

    @pytest.mark.asyncio
    async def test_plain_text_has_no_parse_mode(self):
        """Test plain replies are sent without a parse mode."""
        session = _Session(_Response())
        notifier = TelegramNotifier("123:abc", session=session)

        await notifier.send_message("4242", "Error: bad `col_name`", markdown=False)

        assert session.calls[0][1] == {"chat_id": "4242", "text": "Error: bad `col_name`"}
