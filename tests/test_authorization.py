from chatcore.domain.entities import Message, Participation
from chatcore.domain.exceptions import AccessDeniedError
from chatcore.domain.policies.authorization import (
    can_add_participant,
    can_change_block_status,
    can_delete_any_message,
    can_delete_own_message,
    can_promote,
    can_remove_participant,
    can_send,
    require,
)
from chatcore.domain.value_objects import ConversationKind, ParticipantRole, ParticipantStatus

import pytest


def _member(user_id, admin=False, blocked=False):
    return Participation(
        conversation_id=10,
        user_id=user_id,
        role=ParticipantRole.ADMIN if admin else None,
        status=ParticipantStatus.BLOCKED if blocked else ParticipantStatus.ACTIVE,
    )


def test_send_requires_active_participation():
    assert can_send(_member(1)).allowed
    assert not can_send(None).allowed
    assert not can_send(_member(1, blocked=True)).allowed


def test_only_admins_add_and_promote():
    assert can_add_participant(_member(1, admin=True)).allowed
    assert not can_add_participant(_member(1)).allowed
    assert can_promote(_member(1, admin=True)).allowed
    assert not can_promote(_member(1)).allowed


def test_self_removal_is_always_allowed():
    assert can_remove_participant(_member(2), _member(2)).allowed
    assert can_remove_participant(_member(2, admin=True), _member(2, admin=True)).allowed


def test_removing_others():
    assert can_remove_participant(_member(1, admin=True), _member(2)).allowed
    assert not can_remove_participant(_member(2), _member(1)).allowed
    assert not can_remove_participant(_member(1, admin=True), _member(2, admin=True)).allowed


def test_message_deletion_rules():
    message = Message.text(conversation_id=10, sender_id=2, content="hi")
    assert can_delete_own_message(message, 2).allowed
    assert not can_delete_own_message(message, 1).allowed
    assert can_delete_any_message(_member(1, admin=True)).allowed
    assert not can_delete_any_message(_member(3)).allowed


def test_block_rules_depend_on_conversation_kind():
    assert can_change_block_status(_member(1), _member(2), ConversationKind.PRIVATE).allowed
    assert not can_change_block_status(_member(1), _member(2), ConversationKind.GROUP).allowed
    assert can_change_block_status(
        _member(1, admin=True), _member(2), ConversationKind.GROUP
    ).allowed
    assert not can_change_block_status(
        _member(1, admin=True), _member(1, admin=True), ConversationKind.GROUP
    ).allowed


def test_group_admins_cannot_block_each_other():
    assert not can_change_block_status(
        _member(1, admin=True), _member(2, admin=True), ConversationKind.GROUP
    ).allowed
    assert can_change_block_status(
        _member(1, admin=True), _member(2, admin=True), ConversationKind.PRIVATE
    ).allowed


def test_require_raises_with_reason():
    with pytest.raises(AccessDeniedError, match="Only admins"):
        require(can_promote(_member(3)))
    require(can_promote(_member(3, admin=True)))
