"""
DomainValidationError - Raised when input breaks a business rule.
Maps to: HTTP 400 Bad Request
"""


class DomainValidationError(Exception):
    """Exception raised for domain validation errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SelfConversationError(DomainValidationError):
    def __init__(self):
        super().__init__("Cannot create a conversation with yourself")
