"""ChatSession aggregate.

A session joins exactly two users and is keyed ``chat-{low}-{high}`` so
that either participant derives the same key. Numeric ids are ordered
numerically, anything else lexicographically.
"""

from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer, String

from messaging.chat.events import ChatSessionRead, ChatSessionStarted
from messaging.domain import messaging
from shared.errors import AccessDenied

PREVIEW_LENGTH = 100


def _order_key(user_id):
    value = str(user_id)
    return (0, int(value), "") if value.isdigit() else (1, 0, value)


def ordered_participants(first_user_id, second_user_id):
    if str(first_user_id) == str(second_user_id):
        raise ValidationError({"recipient_id": ["Cannot start a chat with yourself."]})
    low, high = sorted((str(first_user_id), str(second_user_id)), key=_order_key)
    return low, high


def session_key(first_user_id, second_user_id) -> str:
    low, high = ordered_participants(first_user_id, second_user_id)
    return f"chat-{low}-{high}"


def preview_of(body, attachment_ids=None) -> str:
    if body and body.strip():
        return body.strip()[:PREVIEW_LENGTH]
    return "[attachment]" if attachment_ids else ""


@messaging.aggregate
class ChatSession:
    session_id = String(identifier=True, max_length=255)
    first_participant_id = Identifier(required=True)
    second_participant_id = Identifier(required=True)
    unread_for_first = Integer(default=0, min_value=0)
    unread_for_second = Integer(default=0, min_value=0)
    last_message_preview = String(max_length=PREVIEW_LENGTH)
    started_at = DateTime()
    last_message_at = DateTime()

    @invariant.post
    def participants_must_differ(self):
        if str(self.first_participant_id) == str(self.second_participant_id):
            raise ValidationError({"session_id": ["A chat session needs two different participants."]})

    @classmethod
    def start(cls, first_user_id, second_user_id):
        low, high = ordered_participants(first_user_id, second_user_id)
        now = datetime.now(UTC)
        session = cls(
            session_id=f"chat-{low}-{high}",
            first_participant_id=low,
            second_participant_id=high,
            unread_for_first=0,
            unread_for_second=0,
            started_at=now,
            last_message_at=now,
        )
        session.raise_(
            ChatSessionStarted(
                session_id=session.session_id,
                first_participant_id=low,
                second_participant_id=high,
                started_at=now,
            )
        )
        return session

    def is_participant(self, user_id):
        return str(user_id) in (str(self.first_participant_id), str(self.second_participant_id))

    def other_participant(self, user_id):
        if str(user_id) == str(self.first_participant_id):
            return str(self.second_participant_id)
        return str(self.first_participant_id)

    def unread_count_for(self, user_id):
        if str(user_id) == str(self.first_participant_id):
            return self.unread_for_first
        if str(user_id) == str(self.second_participant_id):
            return self.unread_for_second
        return 0

    def record_message(self, sender_id, preview, sent_at):
        """Bump the recipient's unread counter and the activity fields."""
        if not self.is_participant(sender_id):
            raise AccessDenied("You are not a participant in this chat session.")

        with atomic_change(self):
            if str(sender_id) == str(self.first_participant_id):
                self.unread_for_second = (self.unread_for_second or 0) + 1
            else:
                self.unread_for_first = (self.unread_for_first or 0) + 1
            self.last_message_preview = preview
            self.last_message_at = sent_at

    def mark_read(self, user_id):
        """Reset ``user_id``'s unread counter and return how many were cleared."""
        if not self.is_participant(user_id):
            raise AccessDenied("You are not a participant in this chat session.")

        cleared = self.unread_count_for(user_id)
        if str(user_id) == str(self.first_participant_id):
            self.unread_for_first = 0
        else:
            self.unread_for_second = 0

        self.raise_(
            ChatSessionRead(
                session_id=self.session_id,
                user_id=str(user_id),
                cleared=cleared,
                read_at=datetime.now(UTC),
            )
        )
        return cleared

    def to_dict(self, user_id=None):
        data = {
            "session_id": self.session_id,
            "participants": [str(self.first_participant_id), str(self.second_participant_id)],
            "last_message_preview": self.last_message_preview,
            "started_at": self.started_at,
            "last_message_at": self.last_message_at,
        }
        if user_id is not None:
            data["other_participant_id"] = self.other_participant(user_id)
            data["unread_count"] = self.unread_count_for(user_id)
        return data
