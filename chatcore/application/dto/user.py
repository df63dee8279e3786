"""User DTOs for search results."""

from chatcore.application.dto.base import CamelModel
from chatcore.domain.entities.user import User


class UserDTO(CamelModel):
    user_id: int
    username: str
    email: str
    phone: str

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        return cls(
            user_id=user.id,
            username=user.username,
            email=user.email,
            phone=user.phone,
        )
