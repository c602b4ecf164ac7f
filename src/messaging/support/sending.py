"""SendSupportMessage — post to a support conversation."""

import json

from protean.fields import Boolean, Identifier, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from messaging.domain import messaging
from messaging.support.message import SupportMessage


@messaging.command(part_of="SupportMessage")
class SendSupportMessage:
    user_id = Identifier(required=True)  # The customer who owns the conversation
    conversation_id = String(required=True, max_length=100)
    body = Text()
    attachment_ids = Text()  # JSON: list of upload ids
    is_admin = Boolean(default=False)


@messaging.command_handler(part_of=SupportMessage)
class SendSupportMessageHandler:
    @handle(SendSupportMessage)
    def send_message(self, command):
        attachment_ids = json.loads(command.attachment_ids) if command.attachment_ids else []
        message = SupportMessage.send(
            conversation_id=command.conversation_id,
            user_id=command.user_id,
            body=command.body,
            attachment_ids=attachment_ids,
            is_admin=bool(command.is_admin),
        )
        current_domain.repository_for(SupportMessage).add(message)
        return str(message.id)
