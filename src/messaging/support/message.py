"""SupportMessage aggregate.

Each message belongs to one customer's conversation (``user_id`` is always
the customer, even when an admin wrote the reply). Read state is tracked
per side: the author's side has read its own message, the other side has
not.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, String, Text

from messaging.domain import messaging
from messaging.support.events import SupportMessageRead, SupportMessageSent


class Sender(Enum):
    USER = "user"
    ADMIN = "admin"


@messaging.aggregate
class SupportMessage:
    conversation_id = String(required=True, max_length=100)
    user_id = Identifier(required=True)
    sender = String(choices=Sender, required=True)
    body = Text()
    attachments = Text(default="[]")  # JSON: list of upload ids
    read_by_admin = Boolean(default=False)
    read_by_user = Boolean(default=False)
    created_at = DateTime()

    @invariant.post
    def body_or_attachment_required(self):
        has_body = bool(self.body and self.body.strip())
        if not has_body and not self.attachment_ids:
            raise ValidationError({"body": ["Message or attachment is required."]})

    @property
    def attachment_ids(self):
        return json.loads(self.attachments) if self.attachments else []

    @classmethod
    def send(cls, conversation_id, user_id, body=None, attachment_ids=None, is_admin=False):
        now = datetime.now(UTC)
        sender = Sender.ADMIN if is_admin else Sender.USER

        message = cls(
            conversation_id=conversation_id,
            user_id=user_id,
            sender=sender.value,
            body=body,
            attachments=json.dumps(list(attachment_ids or [])),
            read_by_admin=sender == Sender.ADMIN,
            read_by_user=sender == Sender.USER,
            created_at=now,
        )
        message.raise_(
            SupportMessageSent(
                message_id=str(message.id),
                conversation_id=conversation_id,
                user_id=str(user_id),
                sender=sender.value,
                has_attachments=bool(attachment_ids),
                sent_at=now,
            )
        )
        return message

    def mark_read_by_admin(self):
        """Returns ``True`` when the flag flipped."""
        if self.sender != Sender.USER.value or self.read_by_admin:
            return False
        self.read_by_admin = True
        self._record_read(Sender.ADMIN)
        return True

    def mark_read_by_user(self):
        """Returns ``True`` when the flag flipped."""
        if self.sender != Sender.ADMIN.value or self.read_by_user:
            return False
        self.read_by_user = True
        self._record_read(Sender.USER)
        return True

    def _record_read(self, reader):
        self.raise_(
            SupportMessageRead(
                message_id=str(self.id),
                conversation_id=self.conversation_id,
                reader=reader.value,
                read_at=datetime.now(UTC),
            )
        )

    def to_dict(self):
        return {
            "id": str(self.id),
            "conversation_id": self.conversation_id,
            "user_id": str(self.user_id),
            "sender": self.sender,
            "body": self.body,
            "attachments": self.attachment_ids,
            "read_by_admin": self.read_by_admin,
            "read_by_user": self.read_by_user,
            "created_at": self.created_at,
        }
