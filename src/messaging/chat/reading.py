"""MarkChatSessionRead — a participant catches up on a session."""

from protean.fields import Identifier, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from messaging.chat.session import ChatSession
from messaging.domain import messaging


@messaging.command(part_of="ChatSession")
class MarkChatSessionRead:
    session_id = String(required=True, max_length=255)
    user_id = Identifier(required=True)


@messaging.command_handler(part_of=ChatSession)
class MarkChatSessionReadHandler:
    @handle(MarkChatSessionRead)
    def mark_read(self, command):
        repo = current_domain.repository_for(ChatSession)
        session = repo.get(command.session_id)
        cleared = session.mark_read(command.user_id)
        repo.add(session)
        return cleared
