"""Participant commands."""

from .add_participant import AddParticipantCommand, AddParticipantHandler
from .remove_participant import RemoveParticipantCommand, RemoveParticipantHandler
from .promote_participant import PromoteParticipantCommand, PromoteParticipantHandler
from .block_participant import (
    BlockParticipantCommand,
    BlockParticipantHandler,
    UnblockParticipantCommand,
    UnblockParticipantHandler,
)

__all__ = [
    "AddParticipantCommand",
    "AddParticipantHandler",
    "RemoveParticipantCommand",
    "RemoveParticipantHandler",
    "PromoteParticipantCommand",
    "PromoteParticipantHandler",
    "BlockParticipantCommand",
    "BlockParticipantHandler",
    "UnblockParticipantCommand",
    "UnblockParticipantHandler",
]
