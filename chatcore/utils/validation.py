"""Input validation shared by the conversation handlers."""

from typing import Optional

from chatcore.config.settings import Config
from chatcore.domain.exceptions.validation_error import DomainValidationError


def validate_name(name: Optional[str], max_length: Optional[int] = None) -> str:
    """Group/custom names: non-blank after trimming, bounded length."""
    max_length = max_length or Config.NAME_MAX_LENGTH
    if name is None or not name.strip():
        raise DomainValidationError("Name is required")
    name = name.strip()
    if len(name) > max_length:
        raise DomainValidationError(
            f"Name must be at most {max_length} characters"
        )
    return name


def validate_content(content: Optional[str], max_length: Optional[int] = None) -> str:
    max_length = max_length or Config.MESSAGE_MAX_LENGTH
    if content is None or not content.strip():
        raise DomainValidationError("Message content cannot be empty")
    if len(content) > max_length:
        raise DomainValidationError(
            f"Message content must be at most {max_length} characters"
        )
    return content
