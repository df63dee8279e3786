"""Participant queries."""

from .list_participants import ListParticipantsQuery, ListParticipantsHandler

__all__ = ["ListParticipantsQuery", "ListParticipantsHandler"]
