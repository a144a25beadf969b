"""
Admin channel views.

The Telegram bot delivers operator messages here. Commands are executed
through the admin dispatcher and the reply is sent back to the chat.
"""

import hmac
import logging

from asgiref.sync import async_to_sync
from django.conf import settings
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.admin.serializers import TelegramUpdateSerializer
from LicenseServer.container import get_container

logger = logging.getLogger(__name__)

SECRET_TOKEN_HEADER = "X-Telegram-Bot-Api-Secret-Token"


class TelegramWebhookView(APIView):
    """
    Webhook for Telegram bot updates.

    Always answers 200 to Telegram once the request is authentic, so a
    failing command is not redelivered; failures are logged instead.
    """

    @extend_schema(
        operation_id="telegram_webhook",
        summary="Telegram Webhook",
        description=(
            "Receives bot updates. Messages from the authorized admin chat are "
            "executed as admin commands (create, list, status, reset_session, delete)."
        ),
        tags=["Admin"],
        request=TelegramUpdateSerializer,
        responses={200: None, 403: None},
    )
    def post(self, request: Request) -> Response:
        """Process a Telegram update."""
        expected_secret = settings.TELEGRAM_WEBHOOK_SECRET
        if expected_secret and not hmac.compare_digest(
            request.headers.get(SECRET_TOKEN_HEADER, ""), expected_secret
        ):
            logger.warning("Rejected webhook call with invalid secret token")
            return Response(status=status.HTTP_403_FORBIDDEN)

        try:
            async_to_sync(self._handle_update)(request)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Error processing webhook: %s", e, exc_info=True)
        return Response(status=status.HTTP_200_OK)

    async def _handle_update(self, request: Request) -> None:
        """Dispatch the message in an update and deliver the reply."""
        serializer = TelegramUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            logger.info("Ignoring malformed Telegram update: %s", serializer.errors)
            return
        message = serializer.validated_data.get("message")
        if not message:
            return

        chat_id = str(message["chat"]["id"])
        container = get_container()
        reply = await container.dispatcher.dispatch(chat_id, message.get("text", ""))

        if container.notifier is None:
            logger.warning("No admin notifier configured; reply to chat %s dropped", chat_id)
            return
        await container.notifier.send_message(chat_id, reply.text, markdown=reply.markdown)
