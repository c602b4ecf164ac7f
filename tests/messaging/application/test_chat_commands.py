"""Application tests for chat messaging."""

import json

import pytest
from messaging.chat.inbox import session_messages, sessions_for
from messaging.chat.reading import MarkChatSessionRead
from messaging.chat.sending import SendChatMessage
from messaging.chat.session import ChatSession
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from shared.errors import AccessDenied


def _send(sender_id, recipient_id, body="Hi", attachment_ids=None):
    command = SendChatMessage(
        sender_id=sender_id,
        recipient_id=recipient_id,
        body=body,
        attachment_ids=json.dumps(attachment_ids or []),
    )
    return current_domain.process(command, asynchronous=False)


class TestSendChatMessage:
    def test_first_message_opens_session(self):
        _send("2", "1", "Hello")
        session = current_domain.repository_for(ChatSession).get("chat-1-2")
        assert session.unread_count_for("1") == 1
        assert session.last_message_preview == "Hello"

    def test_replies_share_one_session(self):
        _send("1", "2", "Hello")
        _send("2", "1", "Hey")
        _send("1", "2", "How are you?")

        session = current_domain.repository_for(ChatSession).get("chat-1-2")
        assert session.unread_count_for("2") == 2
        assert session.unread_count_for("1") == 1
        assert len(sessions_for("1")) == 1

    def test_chat_with_yourself_rejected(self):
        with pytest.raises(ValidationError):
            _send("1", "1")

    def test_attachment_preview(self):
        _send("1", "2", body=None, attachment_ids=["upload-7"])
        session = current_domain.repository_for(ChatSession).get("chat-1-2")
        assert session.last_message_preview == "[attachment]"


class TestMarkChatSessionRead:
    def test_returns_cleared_count(self):
        _send("1", "2", "a")
        _send("1", "2", "b")
        cleared = current_domain.process(MarkChatSessionRead(session_id="chat-1-2", user_id="2"), asynchronous=False)
        assert cleared == 2
        assert current_domain.repository_for(ChatSession).get("chat-1-2").unread_count_for("2") == 0

    def test_outsider_rejected(self):
        _send("1", "2")
        with pytest.raises(AccessDenied):
            current_domain.process(MarkChatSessionRead(session_id="chat-1-2", user_id="3"), asynchronous=False)


class TestChatInbox:
    def test_sessions_listed_for_both_positions(self):
        _send("1", "5")
        _send("9", "5")
        sessions = sessions_for("5")
        assert {session["other_participant_id"] for session in sessions} == {"1", "9"}

    def test_messages_oldest_first_and_paginated(self):
        for body in ("one", "two", "three"):
            _send("1", "2", body)

        messages, meta = session_messages("chat-1-2", user_id="1", page=1, limit=2)

        assert [message["body"] for message in messages] == ["one", "two"]
        assert meta == {"page": 1, "limit": 2, "total": 3}

    def test_unknown_session(self):
        with pytest.raises(ObjectNotFoundError):
            session_messages("chat-1-404")

    def test_outsider_cannot_list_messages(self):
        _send("1", "2")
        with pytest.raises(AccessDenied):
            session_messages("chat-1-2", user_id="3")
