"""ChatMessage aggregate — one message in a chat session."""

import json
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, String, Text

from messaging.chat.events import ChatMessageSent
from messaging.domain import messaging


@messaging.aggregate
class ChatMessage:
    session_id = String(required=True, max_length=255)
    sender_id = Identifier(required=True)
    body = Text()
    attachments = Text(default="[]")  # JSON: list of upload ids
    is_from_ai = Boolean(default=False)
    created_at = DateTime()

    @invariant.post
    def body_or_attachment_required(self):
        if not (self.body and self.body.strip()) and not self.attachment_ids:
            raise ValidationError({"body": ["Message or attachment is required."]})

    @property
    def attachment_ids(self):
        return json.loads(self.attachments) if self.attachments else []

    @classmethod
    def compose(cls, session_id, sender_id, recipient_id, body=None, attachment_ids=None, is_from_ai=False):
        now = datetime.now(UTC)
        message = cls(
            session_id=session_id,
            sender_id=sender_id,
            body=body,
            attachments=json.dumps(list(attachment_ids or [])),
            is_from_ai=is_from_ai,
            created_at=now,
        )
        message.raise_(
            ChatMessageSent(
                message_id=str(message.id),
                session_id=session_id,
                sender_id=str(sender_id),
                recipient_id=str(recipient_id),
                is_from_ai=is_from_ai,
                sent_at=now,
            )
        )
        return message

    def to_dict(self):
        return {
            "id": str(self.id),
            "session_id": self.session_id,
            "sender_id": str(self.sender_id),
            "body": self.body,
            "attachments": self.attachment_ids,
            "is_from_ai": self.is_from_ai,
            "created_at": self.created_at,
        }
