"""BDD tests for chat unread counters."""

import json

from messaging.chat.inbox import sessions_for
from messaging.chat.reading import MarkChatSessionRead
from messaging.chat.sending import SendChatMessage
from messaging.chat.session import ChatSession, session_key
from protean import current_domain
from pytest_bdd import given, parsers, scenarios, then, when

scenarios("features/chat_unread.feature")


@given(parsers.cfparse('user "{sender}" sends "{body}" to user "{recipient}"'))
def send_message(sender, body, recipient):
    current_domain.process(
        SendChatMessage(sender_id=sender, recipient_id=recipient, body=body, attachment_ids=json.dumps([])),
        asynchronous=False,
    )


@when(parsers.cfparse('user "{reader}" reads the session with user "{other}"'))
def read_session(reader, other):
    current_domain.process(
        MarkChatSessionRead(session_id=session_key(reader, other), user_id=reader),
        asynchronous=False,
    )


@then(parsers.cfparse('user "{user}" has {count:d} unread messages in the session with user "{other}"'))
def unread_messages(user, count, other):
    session = current_domain.repository_for(ChatSession).get(session_key(user, other))
    assert session.unread_count_for(user) == count


@then(parsers.cfparse('user "{user}" has exactly {count:d} chat session'))
def session_total(user, count):
    assert len(sessions_for(user)) == count
