"""Notification aggregate — one in-app message to one user.

Notifications are written by the system (order updates) or by staff
(promotions, announcements). The recipient can only read and delete them.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ObjectNotFoundError
from protean.fields import Boolean, DateTime, Identifier, String, Text

from messaging.domain import messaging
from messaging.notification.events import NotificationRead, NotificationSent


class NotificationType(Enum):
    ORDER_STATUS = "order_status"
    PROMO = "promo"
    SYSTEM = "system"


@messaging.aggregate
class Notification:
    user_id = Identifier(required=True)
    title = String(required=True, max_length=255)
    message = Text(required=True)
    notification_type = String(choices=NotificationType, required=True)
    related_order_id = Identifier()
    read = Boolean(default=False)
    sent_at = DateTime()
    read_at = DateTime()

    @classmethod
    def send(cls, user_id, title, message, notification_type, related_order_id=None):
        now = datetime.now(UTC)
        notification = cls(
            user_id=str(user_id),
            title=title,
            message=message,
            notification_type=notification_type,
            related_order_id=str(related_order_id) if related_order_id else None,
            read=False,
            sent_at=now,
        )
        notification.raise_(
            NotificationSent(
                notification_id=str(notification.id),
                user_id=str(user_id),
                notification_type=notification_type,
                related_order_id=notification.related_order_id,
                sent_at=now,
            )
        )
        return notification

    def assert_owned_by(self, user_id):
        # Other users' notifications look the same as missing ones
        if str(self.user_id) != str(user_id):
            raise ObjectNotFoundError(
                f"Notification with ID '{self.id}' not found or does not belong to the user."
            )

    def mark_read(self):
        """Returns ``False`` when the notification was already read."""
        if self.read:
            return False

        now = datetime.now(UTC)
        self.read = True
        self.read_at = now
        self.raise_(NotificationRead(notification_id=str(self.id), user_id=str(self.user_id), read_at=now))
        return True

    def to_dict(self):
        return {
            "id": str(self.id),
            "user_id": str(self.user_id),
            "title": self.title,
            "message": self.message,
            "type": self.notification_type,
            "related_order_id": self.related_order_id,
            "read": bool(self.read),
            "sent_at": self.sent_at,
        }
