"""SendChatMessage — deliver a message, opening the session on first contact."""

import json

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.fields import Boolean, Identifier, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from messaging.chat.message import ChatMessage
from messaging.chat.session import ChatSession, preview_of, session_key
from messaging.domain import messaging

logger = structlog.get_logger(__name__)


@messaging.command(part_of="ChatMessage")
class SendChatMessage:
    sender_id = Identifier(required=True)
    recipient_id = Identifier(required=True)
    body = Text()
    attachment_ids = Text()  # JSON: list of upload ids
    is_from_ai = Boolean(default=False)


@messaging.command_handler(part_of=ChatMessage)
class SendChatMessageHandler:
    @handle(SendChatMessage)
    def send_message(self, command):
        attachment_ids = json.loads(command.attachment_ids) if command.attachment_ids else []
        key = session_key(command.sender_id, command.recipient_id)

        session_repo = current_domain.repository_for(ChatSession)
        try:
            session = session_repo.get(key)
        except ObjectNotFoundError:
            session = ChatSession.start(command.sender_id, command.recipient_id)
            logger.info("Chat session started", session_id=key)

        message = ChatMessage.compose(
            session_id=key,
            sender_id=command.sender_id,
            recipient_id=command.recipient_id,
            body=command.body,
            attachment_ids=attachment_ids,
            is_from_ai=bool(command.is_from_ai),
        )
        session.record_message(command.sender_id, preview_of(command.body, attachment_ids), message.created_at)

        current_domain.repository_for(ChatMessage).add(message)
        session_repo.add(session)
        return str(message.id)
