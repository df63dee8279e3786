"""
User Repository Port - read access to the identity service's users.
"""

from abc import ABC, abstractmethod
from typing import Optional
from chatcore.domain.entities.user import User


class UserRepository(ABC):
    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]: ...

    @abstractmethod
    async def search(self, query: str, limit: int) -> list[User]:
        """Case-insensitive substring match on username, email or phone."""
        ...

    @abstractmethod
    async def save(self, user: User) -> User: ...
