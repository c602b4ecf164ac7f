"""Domain events for chat sessions and chat messages."""

from protean.fields import Boolean, DateTime, Identifier, Integer, String

from messaging.domain import messaging


@messaging.event(part_of="ChatSession")
class ChatSessionStarted:
    """The first message between two users opened a session."""

    __version__ = 1

    session_id = String(required=True)
    first_participant_id = Identifier(required=True)
    second_participant_id = Identifier(required=True)
    started_at = DateTime(required=True)


@messaging.event(part_of="ChatSession")
class ChatSessionRead:
    """A participant caught up on a session."""

    __version__ = 1

    session_id = String(required=True)
    user_id = Identifier(required=True)
    cleared = Integer(required=True)
    read_at = DateTime(required=True)


@messaging.event(part_of="ChatMessage")
class ChatMessageSent:
    __version__ = 1

    message_id = Identifier(required=True)
    session_id = String(required=True)
    sender_id = Identifier(required=True)
    recipient_id = Identifier(required=True)
    is_from_ai = Boolean(default=False)
    sent_at = DateTime(required=True)
