"""Conversation and message delivery core for the chat backend."""

__version__ = "1.0.0"
