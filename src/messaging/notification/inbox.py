"""Notification inbox queries."""

from protean.utils.globals import current_domain

from messaging.notification.notification import Notification
from shared.pagination import fetch_all


def notifications_for(user_id, read=None) -> list[dict]:
    """The user's notifications, newest first, optionally by read state."""
    query = current_domain.repository_for(Notification)._dao.query.filter(user_id=str(user_id))
    if read is not None:
        query = query.filter(read=read)
    return [notification.to_dict() for notification in fetch_all(query.order_by("-sent_at"))]


def unread_notification_count(user_id) -> int:
    query = current_domain.repository_for(Notification)._dao.query.filter(user_id=str(user_id), read=False)
    return query.all().total
