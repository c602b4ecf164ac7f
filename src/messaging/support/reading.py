"""Mark support messages as read.

Each command flips the read flag of the other side's messages and returns
how many messages changed.
"""

import structlog
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from messaging.domain import messaging
from messaging.support.message import Sender, SupportMessage
from shared.errors import AccessDenied
from shared.pagination import fetch_all

logger = structlog.get_logger(__name__)


@messaging.command(part_of="SupportMessage")
class MarkSupportReadByAdmin:
    conversation_id = String(required=True, max_length=100)
    is_admin = Boolean(default=False)


@messaging.command(part_of="SupportMessage")
class MarkAllSupportReadByAdmin:
    is_admin = Boolean(default=False)


@messaging.command(part_of="SupportMessage")
class MarkSupportReadByUser:
    conversation_id = String(required=True, max_length=100)
    user_id = Identifier(required=True)


def _require_admin(is_admin):
    if not is_admin:
        raise AccessDenied("Only administrators can mark messages as read.")


@messaging.command_handler(part_of=SupportMessage)
class SupportReadHandler:
    def _flip(self, criteria, mark):
        repo = current_domain.repository_for(SupportMessage)
        count = 0
        for message in fetch_all(repo._dao.query.filter(**criteria)):
            if mark(message):
                repo.add(message)
                count += 1
        return count

    @handle(MarkSupportReadByAdmin)
    def mark_read_by_admin(self, command):
        _require_admin(command.is_admin)
        count = self._flip(
            {"conversation_id": command.conversation_id, "sender": Sender.USER.value, "read_by_admin": False},
            SupportMessage.mark_read_by_admin,
        )
        logger.info("Support messages read by admin", conversation_id=command.conversation_id, count=count)
        return count

    @handle(MarkAllSupportReadByAdmin)
    def mark_all_read_by_admin(self, command):
        _require_admin(command.is_admin)
        return self._flip(
            {"sender": Sender.USER.value, "read_by_admin": False},
            SupportMessage.mark_read_by_admin,
        )

    @handle(MarkSupportReadByUser)
    def mark_read_by_user(self, command):
        return self._flip(
            {
                "conversation_id": command.conversation_id,
                "user_id": str(command.user_id),
                "sender": Sender.ADMIN.value,
                "read_by_user": False,
            },
            SupportMessage.mark_read_by_user,
        )
