"""
URL configuration for the admin channel.
"""

from django.urls import path

from api.v1.admin import views

urlpatterns = [
    path(
        "webhook",
        views.TelegramWebhookView.as_view(),
        name="telegram-webhook",
    ),
]
