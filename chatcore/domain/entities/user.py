"""
User Entity - a registered user, owned by the identity service.

The core only reads users: to check they exist, to default private
conversation display names to the other party's phone, and to search.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class User:
    id: int
    username: str
    email: str
    phone: str
    created_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.username:
            raise ValueError("User must have a username")

    @property
    def display_name(self) -> str:
        return self.username
