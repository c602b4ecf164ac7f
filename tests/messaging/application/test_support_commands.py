"""Application tests for support sending, read marking and inbox queries."""

import json

import pytest
from messaging.support.inbox import admin_overview, conversation, unread_count
from messaging.support.reading import (
    MarkAllSupportReadByAdmin,
    MarkSupportReadByAdmin,
    MarkSupportReadByUser,
)
from messaging.support.sending import SendSupportMessage
from protean import current_domain
from protean.exceptions import ObjectNotFoundError
from shared.errors import AccessDenied


def _send(conversation_id, user_id, body, is_admin=False, attachment_ids=None):
    command = SendSupportMessage(
        conversation_id=conversation_id,
        user_id=user_id,
        body=body,
        attachment_ids=json.dumps(attachment_ids or []),
        is_admin=is_admin,
    )
    return current_domain.process(command, asynchronous=False)


def _process(command):
    return current_domain.process(command, asynchronous=False)


class TestAdminReads:
    def test_marks_only_unread_customer_messages(self):
        _send("conv-1", "42", "First")
        _send("conv-1", "42", "Second")
        _send("conv-1", "42", "Reply", is_admin=True)
        _send("conv-2", "43", "Other conversation")

        assert _process(MarkSupportReadByAdmin(conversation_id="conv-1", is_admin=True)) == 2
        assert _process(MarkSupportReadByAdmin(conversation_id="conv-1", is_admin=True)) == 0

    def test_non_admin_rejected(self):
        _send("conv-1", "42", "Hello")
        with pytest.raises(AccessDenied) as exc:
            _process(MarkSupportReadByAdmin(conversation_id="conv-1", is_admin=False))
        assert exc.value.message == "Only administrators can mark messages as read."

    def test_mark_all(self):
        _send("conv-1", "42", "Hello")
        _send("conv-2", "43", "Hi")
        assert _process(MarkAllSupportReadByAdmin(is_admin=True)) == 2
        assert all(entry["unread_count_for_admin"] == 0 for entry in admin_overview(True))


class TestCustomerReads:
    def test_unread_count_tracks_admin_replies(self):
        _send("conv-1", "42", "Hello")
        _send("conv-1", "42", "Reply one", is_admin=True)
        _send("conv-1", "42", "Reply two", is_admin=True)
        assert unread_count("42") == 2

        assert _process(MarkSupportReadByUser(conversation_id="conv-1", user_id="42")) == 2
        assert unread_count("42") == 0

    def test_other_customer_cannot_clear_flags(self):
        _send("conv-1", "42", "Reply", is_admin=True)
        assert _process(MarkSupportReadByUser(conversation_id="conv-1", user_id="99")) == 0
        assert unread_count("42") == 1


class TestInbox:
    def test_conversation_oldest_first(self):
        _send("conv-1", "42", "First")
        _send("conv-1", "42", "Second", is_admin=True)
        bodies = [message["body"] for message in conversation("conv-1", "42")]
        assert bodies == ["First", "Second"]

    def test_empty_conversation_not_found(self):
        with pytest.raises(ObjectNotFoundError):
            conversation("conv-missing", "42")

    def test_overview_groups_by_conversation(self):
        _send("conv-1", "42", "Old")
        _send("conv-2", "43", "Older")
        _send("conv-1", "42", "Newest")

        overview = admin_overview(True)

        assert [entry["conversation_id"] for entry in overview] == ["conv-1", "conv-2"]
        assert overview[0]["latest_message"]["body"] == "Newest"
        assert overview[0]["unread_count_for_admin"] == 2

    def test_overview_requires_admin(self):
        with pytest.raises(AccessDenied):
            admin_overview(False)
