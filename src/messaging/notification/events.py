"""Domain events for the Notification aggregate."""

from protean.fields import DateTime, Identifier, String

from messaging.domain import messaging


@messaging.event(part_of="Notification")
class NotificationSent:
    __version__ = 1

    notification_id = Identifier(required=True)
    user_id = Identifier(required=True)
    notification_type = String(required=True)
    related_order_id = Identifier()
    sent_at = DateTime(required=True)


@messaging.event(part_of="Notification")
class NotificationRead:
    __version__ = 1

    notification_id = Identifier(required=True)
    user_id = Identifier(required=True)
    read_at = DateTime(required=True)
