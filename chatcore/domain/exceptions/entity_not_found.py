"""
EntityNotFoundError - Raised when a requested entity does not exist.
Maps to: HTTP 404 Not Found
"""


class EntityNotFoundError(Exception):
    """Exception raised when a requested entity is not found."""

    def __init__(self, message: str = "The requested entity was not found."):
        super().__init__(message)


class NotAParticipantError(EntityNotFoundError):
    """The actor (or target) has no participation in the conversation."""

    def __init__(self, user_id: int, conversation_id: int):
        super().__init__(
            f"User {user_id} is not a participant in conversation {conversation_id}"
        )
        self.user_id = user_id
        self.conversation_id = conversation_id
