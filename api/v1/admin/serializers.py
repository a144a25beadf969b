"""
Serializers for the Telegram admin webhook.

Only the parts of a Telegram ``Update`` the admin channel uses are declared.
"""

from rest_framework import serializers


class TelegramChatSerializer(serializers.Serializer):
    """Chat that sent the message."""

    id = serializers.IntegerField()


class TelegramMessageSerializer(serializers.Serializer):
    """Incoming message."""

    chat = TelegramChatSerializer()
    text = serializers.CharField(required=False, allow_blank=True, default="")


class TelegramUpdateSerializer(serializers.Serializer):
    """Telegram webhook update."""

    update_id = serializers.IntegerField(required=False)
    message = TelegramMessageSerializer(required=False)
