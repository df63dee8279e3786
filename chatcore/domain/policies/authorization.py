"""
Authorization Engine - who may do what inside a conversation.

Every rule is a pure function over already-loaded participations and
returns a Decision. No I/O happens here: handlers look the rows up,
turn missing rows into NotFound, and call require() on the outcome.
"""

from dataclasses import dataclass
from typing import Optional

from chatcore.domain.entities.message import Message
from chatcore.domain.entities.participation import Participation
from chatcore.domain.exceptions.access_denied import AccessDeniedError
from chatcore.domain.value_objects.conversation_kind import ConversationKind


@dataclass(frozen=True)
class Decision:
    allowed: bool
    reason: str = ""

    def __bool__(self) -> bool:
        return self.allowed


ALLOW = Decision(True)


def _deny(reason: str) -> Decision:
    return Decision(False, reason)


def can_send(actor: Optional[Participation]) -> Decision:
    if actor is None:
        return _deny("Only participants can send messages")
    if actor.is_blocked:
        return _deny("Blocked participants cannot send messages")
    return ALLOW


def can_add_participant(actor: Participation) -> Decision:
    if not actor.is_admin:
        return _deny("Only admins can add participants")
    return ALLOW


def can_remove_participant(actor: Participation, target: Participation) -> Decision:
    if actor.user_id == target.user_id:
        return ALLOW
    if not actor.is_admin:
        return _deny("Only admins can remove other participants")
    if target.is_admin:
        return _deny("Admins cannot remove other admins")
    return ALLOW


def can_promote(actor: Participation) -> Decision:
    if not actor.is_admin:
        return _deny("Only admins can promote participants")
    return ALLOW


def can_delete_own_message(message: Message, actor_id: int) -> Decision:
    if not message.is_sent_by(actor_id):
        return _deny("You can only delete your own messages")
    return ALLOW


def can_delete_any_message(actor: Participation) -> Decision:
    if not actor.is_admin:
        return _deny("Only admins can delete other participants' messages")
    return ALLOW


def can_change_block_status(
    actor: Participation, target: Participation, kind: ConversationKind
) -> Decision:
    """Private chats: either side may block the other.

    Groups: admins only, and never against another admin.
    """
    if actor.user_id == target.user_id:
        return _deny("You cannot block or unblock yourself")
    if kind == ConversationKind.PRIVATE:
        return ALLOW
    if not actor.is_admin:
        return _deny("Only admins can block or unblock participants")
    if target.is_admin:
        return _deny("Admins cannot block or unblock other admins")
    return ALLOW


def require(decision: Decision) -> None:
    if not decision.allowed:
        raise AccessDeniedError(decision.reason or "Access denied")
