"""Chat inbox queries."""

from protean.utils.globals import current_domain

from messaging.chat.message import ChatMessage
from messaging.chat.session import ChatSession
from shared.errors import AccessDenied
from shared.pagination import fetch_all, paginate


def sessions_for(user_id) -> list[dict]:
    """Sessions ``user_id`` takes part in, most recent activity first."""
    query = current_domain.repository_for(ChatSession)._dao.query
    sessions = fetch_all(query.filter(first_participant_id=str(user_id))) + fetch_all(
        query.filter(second_participant_id=str(user_id))
    )
    sessions.sort(key=lambda session: session.last_message_at, reverse=True)
    return [session.to_dict(user_id) for session in sessions]


def session_messages(session_id, user_id=None, page=None, limit=None):
    """Messages of a session, oldest first.

    Raises ``ObjectNotFoundError`` for an unknown session and
    ``AccessDenied`` when ``user_id`` is given and is not a participant.
    """
    session = current_domain.repository_for(ChatSession).get(session_id)
    if user_id is not None and not session.is_participant(user_id):
        raise AccessDenied("You are not a participant in this chat session.")

    query = current_domain.repository_for(ChatMessage)._dao.query.filter(session_id=session_id)
    messages, meta = paginate(query.order_by("created_at"), page, limit)
    return [message.to_dict() for message in messages], meta
