"""
User repository implementation following SOLID principles.
"""

from typing import Optional

from ..domain.entities import User
from ..domain.interfaces import IUserRepository
from .base import InMemoryRepository


class UserRepository(InMemoryRepository[User], IUserRepository):
    """Repository for User storage operations."""

    def find_by_username(self, username: str) -> Optional[User]:
        for user in self._items:
            if user.username == username:
                return user
        return None
