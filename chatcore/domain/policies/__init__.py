"""
POLICIES - Pure authorization rules over participations.
"""

from chatcore.domain.policies.authorization import (
    Decision,
    can_send,
    can_add_participant,
    can_remove_participant,
    can_promote,
    can_delete_own_message,
    can_delete_any_message,
    can_change_block_status,
    require,
)

__all__ = [
    "Decision",
    "can_send",
    "can_add_participant",
    "can_remove_participant",
    "can_promote",
    "can_delete_own_message",
    "can_delete_any_message",
    "can_change_block_status",
    "require",
]
