"""Support inbox queries for customers and admins."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from messaging.support.message import Sender, SupportMessage
from shared.errors import AccessDenied
from shared.pagination import fetch_all


def _messages(**criteria):
    query = current_domain.repository_for(SupportMessage)._dao.query
    return query.filter(**criteria) if criteria else query


def conversation(conversation_id, user_id) -> list[dict]:
    """Messages of one customer's conversation, oldest first."""
    messages = fetch_all(_messages(conversation_id=conversation_id, user_id=str(user_id)).order_by("created_at"))
    if not messages:
        raise ObjectNotFoundError("No messages found for this conversation.")
    return [message.to_dict() for message in messages]


def admin_overview(is_admin) -> list[dict]:
    """Every conversation with its latest message and admin unread count.

    Conversations are ordered by their latest message, newest first.
    """
    if not is_admin:
        raise AccessDenied("Only administrators can view all support conversations.")

    overview = {}
    for message in fetch_all(_messages().order_by("-created_at")):
        entry = overview.get(message.conversation_id)
        if entry is None:
            entry = overview[message.conversation_id] = {
                "conversation_id": message.conversation_id,
                "user_id": str(message.user_id),
                "latest_message": message.to_dict(),
                "unread_count_for_admin": 0,
            }
        if message.sender == Sender.USER.value and not message.read_by_admin:
            entry["unread_count_for_admin"] += 1
    return list(overview.values())


def unread_count(user_id) -> int:
    """Admin replies the customer has not read yet."""
    return len(fetch_all(_messages(user_id=str(user_id), sender=Sender.ADMIN.value, read_by_user=False)))
