"""Domain events for the SupportMessage aggregate."""

from protean.fields import Boolean, DateTime, Identifier, String

from messaging.domain import messaging


@messaging.event(part_of="SupportMessage")
class SupportMessageSent:
    """A customer or an admin posted to a support conversation."""

    __version__ = 1

    message_id = Identifier(required=True)
    conversation_id = String(required=True)
    user_id = Identifier(required=True)
    sender = String(required=True)
    has_attachments = Boolean(default=False)
    sent_at = DateTime(required=True)


@messaging.event(part_of="SupportMessage")
class SupportMessageRead:
    """One side of the conversation read a message from the other side."""

    __version__ = 1

    message_id = Identifier(required=True)
    conversation_id = String(required=True)
    reader = String(required=True)
    read_at = DateTime(required=True)

