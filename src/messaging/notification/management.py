"""Notification commands — send, mark read and delete."""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.fields import Boolean, Identifier, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from messaging.domain import messaging
from messaging.notification.notification import Notification
from shared.errors import AccessDenied

logger = structlog.get_logger(__name__)


@messaging.command(part_of="Notification")
class SendNotification:
    user_id = Identifier(required=True)
    title = String(required=True, max_length=255)
    message = Text(required=True)
    notification_type = String(required=True, max_length=20)
    related_order_id = Identifier()
    is_admin = Boolean(default=False)


@messaging.command(part_of="Notification")
class MarkNotificationRead:
    notification_id = Identifier(required=True)
    user_id = Identifier(required=True)


@messaging.command(part_of="Notification")
class DeleteNotification:
    notification_id = Identifier(required=True)
    user_id = Identifier(required=True)


def owned_notification(notification_id, user_id) -> Notification:
    try:
        notification = current_domain.repository_for(Notification).get(str(notification_id))
    except ObjectNotFoundError:
        raise ObjectNotFoundError(
            f"Notification with ID '{notification_id}' not found or does not belong to the user."
        ) from None
    notification.assert_owned_by(user_id)
    return notification


@messaging.command_handler(part_of=Notification)
class NotificationHandler:
    @handle(SendNotification)
    def send_notification(self, command):
        if not command.is_admin:
            raise AccessDenied("Only administrators can send notifications.")
        notification = Notification.send(
            user_id=command.user_id,
            title=command.title,
            message=command.message,
            notification_type=command.notification_type,
            related_order_id=command.related_order_id,
        )
        current_domain.repository_for(Notification).add(notification)
        return str(notification.id)

    @handle(MarkNotificationRead)
    def mark_read(self, command):
        notification = owned_notification(command.notification_id, command.user_id)
        if not notification.mark_read():
            return False
        current_domain.repository_for(Notification).add(notification)
        return True

    @handle(DeleteNotification)
    def delete_notification(self, command):
        notification = owned_notification(command.notification_id, command.user_id)
        current_domain.repository_for(Notification)._dao.delete(notification)
        logger.info("Notification deleted", notification_id=str(notification.id), user_id=str(command.user_id))
