"""
ConflictError - Raised when the request clashes with existing state.
Maps to: HTTP 409 Conflict
"""


class ConflictError(Exception):
    """Base class for state conflicts. Never retried automatically."""

    def __init__(self, message: str = "Conflict with current state"):
        super().__init__(message)


class DuplicateConversationError(ConflictError):
    def __init__(self, message: str = "Private conversation already exists"):
        super().__init__(message)


class AlreadyParticipantError(ConflictError):
    def __init__(self, user_id: int, conversation_id: int):
        super().__init__(
            f"User {user_id} is already a participant in conversation {conversation_id}"
        )


class AlreadyBlockedError(ConflictError):
    pass
