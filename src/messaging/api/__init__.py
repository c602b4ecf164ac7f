"""Messaging domain API package."""

from messaging.api.routes import chat_router, notification_router, support_router

__all__ = ["support_router", "chat_router", "notification_router"]
