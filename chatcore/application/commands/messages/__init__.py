"""Message commands."""

from .send_message import SendMessageCommand, SendMessageHandler
from .delete_message import (
    DeleteMessageCommand,
    DeleteMessageHandler,
    DeleteMessageAsAdminCommand,
    DeleteMessageAsAdminHandler,
)

__all__ = [
    "SendMessageCommand",
    "SendMessageHandler",
    "DeleteMessageCommand",
    "DeleteMessageHandler",
    "DeleteMessageAsAdminCommand",
    "DeleteMessageAsAdminHandler",
]
