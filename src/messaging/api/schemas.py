"""Pydantic request schemas for the Messaging API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SendSupportMessageRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "user_id": "42",
                    "conversation_id": "conv-42-1",
                    "body": "My order has not arrived yet.",
                    "attachment_ids": [],
                    "is_admin": False,
                }
            ]
        }
    }

    user_id: str
    conversation_id: str = Field(..., max_length=100)
    body: str | None = None
    attachment_ids: list[str] = Field(default_factory=list)
    is_admin: bool = False


class MarkReadByAdminRequest(BaseModel):
    conversation_id: str = Field(..., max_length=100)
    is_admin: bool = False


class MarkReadByUserRequest(BaseModel):
    conversation_id: str = Field(..., max_length=100)
    user_id: str


class SendChatMessageRequest(BaseModel):
    sender_id: str
    recipient_id: str
    body: str | None = None
    attachment_ids: list[str] = Field(default_factory=list)
    is_from_ai: bool = False


class MarkChatSessionReadRequest(BaseModel):
    user_id: str


class SendNotificationRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "user_id": "42",
                    "title": "Weekend sale",
                    "message": "20% off all sunglasses until Sunday.",
                    "type": "promo",
                    "is_admin": True,
                }
            ]
        }
    }

    user_id: str
    title: str = Field(..., max_length=255)
    message: str
    type: str = Field(..., max_length=20)
    related_order_id: str | None = None
    is_admin: bool = False


class NotificationOwnerRequest(BaseModel):
    user_id: str
