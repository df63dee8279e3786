"""Conversation commands."""

from .create_private import (
    CreatePrivateConversationCommand,
    CreatePrivateConversationHandler,
)
from .create_group import CreateGroupConversationCommand, CreateGroupConversationHandler
from .rename_group import RenameGroupCommand, RenameGroupHandler

__all__ = [
    "CreatePrivateConversationCommand",
    "CreatePrivateConversationHandler",
    "CreateGroupConversationCommand",
    "CreateGroupConversationHandler",
    "RenameGroupCommand",
    "RenameGroupHandler",
]
