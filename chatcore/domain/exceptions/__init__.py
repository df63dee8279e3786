"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and caught by presentation layer.
Presentation layer maps them to HTTP status codes.
"""

from chatcore.domain.exceptions.entity_not_found import (
    EntityNotFoundError,
    NotAParticipantError,
)
from chatcore.domain.exceptions.access_denied import AccessDeniedError
from chatcore.domain.exceptions.validation_error import (
    DomainValidationError,
    SelfConversationError,
)
from chatcore.domain.exceptions.conflict import (
    ConflictError,
    DuplicateConversationError,
    AlreadyParticipantError,
    AlreadyBlockedError,
)

__all__ = [
    "EntityNotFoundError",
    "NotAParticipantError",
    "AccessDeniedError",
    "DomainValidationError",
    "SelfConversationError",
    "ConflictError",
    "DuplicateConversationError",
    "AlreadyParticipantError",
    "AlreadyBlockedError",
]
