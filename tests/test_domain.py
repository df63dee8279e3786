import pytest

from chatcore.domain.entities import Conversation, Participation, private_pair_key
from chatcore.domain.exceptions import AlreadyBlockedError
from chatcore.domain.value_objects import (
    ParticipantRole,
    ParticipationKey,
    body_from_record,
)


def test_private_pair_key_is_order_independent():
    assert private_pair_key(7, 3) == private_pair_key(3, 7) == "3:7"
    assert Conversation.new_private(9, 2).private_pair == "2:9"
    assert Conversation.new_group("Team", 1).private_pair is None


def test_private_conversation_cannot_be_renamed():
    with pytest.raises(ValueError):
        Conversation.new_private(1, 2).rename("Us")


def test_participation_key_rejects_non_positive_ids():
    assert str(Participation(4, 9).key) == "4:9"
    with pytest.raises(ValueError):
        ParticipationKey(0, 1)


def test_role_parsing():
    assert ParticipantRole.parse(None) is None
    assert ParticipantRole.parse("") is None
    assert ParticipantRole.parse("Admin") == ParticipantRole.ADMIN
    with pytest.raises(ValueError):
        ParticipantRole.parse("admin")


def test_block_state_transitions():
    participation = Participation(1, 2)
    participation.block()
    assert participation.is_blocked
    with pytest.raises(AlreadyBlockedError):
        participation.block()
    assert participation.unblock() is True
    assert participation.unblock() is False


def test_unknown_message_type_is_rejected():
    assert body_from_record("text", "hi").content == "hi"
    with pytest.raises(ValueError):
        body_from_record("sticker", "x")
