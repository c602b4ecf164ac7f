"""FastAPI routes for the Messaging domain — support desk, chat and notifications."""

import json

from fastapi import APIRouter
from protean.utils.globals import current_domain

from messaging.api.schemas import (
    MarkChatSessionReadRequest,
    MarkReadByAdminRequest,
    MarkReadByUserRequest,
    NotificationOwnerRequest,
    SendChatMessageRequest,
    SendNotificationRequest,
    SendSupportMessageRequest,
)
from messaging.chat.inbox import session_messages, sessions_for
from messaging.chat.message import ChatMessage
from messaging.chat.reading import MarkChatSessionRead
from messaging.chat.sending import SendChatMessage
from messaging.notification.inbox import notifications_for, unread_notification_count
from messaging.notification.management import DeleteNotification, MarkNotificationRead, SendNotification
from messaging.notification.notification import Notification
from messaging.support.inbox import admin_overview, conversation, unread_count
from messaging.support.message import SupportMessage
from messaging.support.reading import (
    MarkAllSupportReadByAdmin,
    MarkSupportReadByAdmin,
    MarkSupportReadByUser,
)
from messaging.support.sending import SendSupportMessage
from shared.api import respond

support_router = APIRouter(prefix="/support", tags=["support"])
chat_router = APIRouter(prefix="/chat", tags=["chat"])
notification_router = APIRouter(prefix="/notifications", tags=["notifications"])


# ---------------------------------------------------------------------------
# Support
# ---------------------------------------------------------------------------
@support_router.post("/messages", status_code=201)
async def send_support_message(body: SendSupportMessageRequest):
    command = SendSupportMessage(
        user_id=body.user_id,
        conversation_id=body.conversation_id,
        body=body.body,
        attachment_ids=json.dumps(body.attachment_ids),
        is_admin=body.is_admin,
    )
    message_id = current_domain.process(command, asynchronous=False)
    message = current_domain.repository_for(SupportMessage).get(message_id)
    return respond("Support message sent successfully.", message.to_dict(), status_code=201)


@support_router.get("/conversations/{conversation_id}")
async def get_conversation(conversation_id: str, user_id: str):
    messages = conversation(conversation_id, user_id)
    current_domain.process(
        MarkSupportReadByUser(conversation_id=conversation_id, user_id=user_id),
        asynchronous=False,
    )
    return respond(f"Support conversation {conversation_id} retrieved successfully.", messages)


@support_router.get("/admin/conversations")
async def get_admin_conversations(is_admin: bool = False):
    overview = admin_overview(is_admin)
    current_domain.process(MarkAllSupportReadByAdmin(is_admin=is_admin), asynchronous=False)
    return respond("All support conversations retrieved for admin.", overview)


@support_router.get("/unread-count")
async def get_unread_count(user_id: str):
    return respond("Unread support message count retrieved.", {"unread_count": unread_count(user_id)})


@support_router.post("/mark-read/admin")
async def mark_read_by_admin(body: MarkReadByAdminRequest):
    count = current_domain.process(
        MarkSupportReadByAdmin(conversation_id=body.conversation_id, is_admin=body.is_admin),
        asynchronous=False,
    )
    return respond(
        f"Messages in support conversation {body.conversation_id} marked as read by admin.",
        {"count": count},
    )


@support_router.post("/mark-read/user")
async def mark_read_by_user(body: MarkReadByUserRequest):
    count = current_domain.process(
        MarkSupportReadByUser(conversation_id=body.conversation_id, user_id=body.user_id),
        asynchronous=False,
    )
    return respond(
        f"Messages in support conversation {body.conversation_id} marked as read by user.",
        {"count": count},
    )


# ---------------------------------------------------------------------------
# Chat
# ---------------------------------------------------------------------------
@chat_router.post("/messages", status_code=201)
async def send_chat_message(body: SendChatMessageRequest):
    command = SendChatMessage(
        sender_id=body.sender_id,
        recipient_id=body.recipient_id,
        body=body.body,
        attachment_ids=json.dumps(body.attachment_ids),
        is_from_ai=body.is_from_ai,
    )
    message_id = current_domain.process(command, asynchronous=False)
    message = current_domain.repository_for(ChatMessage).get(message_id)
    return respond("Chat message sent successfully.", message.to_dict(), status_code=201)


@chat_router.get("/sessions")
async def get_sessions(user_id: str):
    return respond("Chat sessions fetched successfully.", sessions_for(user_id))


@chat_router.get("/sessions/{session_id}/messages")
async def get_session_messages(
    session_id: str,
    user_id: str | None = None,
    page: int | None = None,
    limit: int | None = None,
):
    messages, meta = session_messages(session_id, user_id=user_id, page=page, limit=limit)
    return respond("Chat messages fetched successfully.", messages, meta=meta)


@chat_router.post("/sessions/{session_id}/read")
async def mark_session_read(session_id: str, body: MarkChatSessionReadRequest):
    cleared = current_domain.process(
        MarkChatSessionRead(session_id=session_id, user_id=body.user_id),
        asynchronous=False,
    )
    return respond("Chat session marked as read.", {"count": cleared})


# ---------------------------------------------------------------------------
# Notifications
# ---------------------------------------------------------------------------
@notification_router.post("", status_code=201)
async def send_notification(body: SendNotificationRequest):
    command = SendNotification(
        user_id=body.user_id,
        title=body.title,
        message=body.message,
        notification_type=body.type,
        related_order_id=body.related_order_id,
        is_admin=body.is_admin,
    )
    notification_id = current_domain.process(command, asynchronous=False)
    notification = current_domain.repository_for(Notification).get(notification_id)
    return respond("Notification sent successfully.", notification.to_dict(), status_code=201)


@notification_router.get("/me")
async def get_my_notifications(user_id: str, read: bool | None = None):
    return respond("Notifications retrieved successfully.", notifications_for(user_id, read=read))


@notification_router.get("/me/unread-count")
async def get_unread_notification_count(user_id: str):
    return respond(
        "Unread notification count retrieved successfully.",
        {"count": unread_notification_count(user_id)},
    )


@notification_router.put("/mark-read/{notification_id}")
async def mark_notification_read(notification_id: str, body: NotificationOwnerRequest):
    command = MarkNotificationRead(notification_id=notification_id, user_id=body.user_id)
    if not current_domain.process(command, asynchronous=False):
        return respond(
            f"Notification '{notification_id}' is already marked as read.",
            {"id": notification_id, "read": True},
        )
    notification = current_domain.repository_for(Notification).get(notification_id)
    return respond(f"Notification '{notification_id}' marked as read.", notification.to_dict())


@notification_router.delete("/{notification_id}")
async def delete_notification(notification_id: str, user_id: str):
    current_domain.process(DeleteNotification(notification_id=notification_id, user_id=user_id), asynchronous=False)
    return respond(f"Notification '{notification_id}' deleted successfully.")
