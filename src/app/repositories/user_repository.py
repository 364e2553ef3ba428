from abc import ABC, abstractmethod
from typing import Any, Optional
from uuid import UUID

from src.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def find_by(self, field: str, value: Any) -> Optional[User]:
        """Get the oldest user whose ``field`` equals ``value``"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass

    @abstractmethod
    async def reload(self, user: User) -> Optional[User]:
        """Re-read a user from the store, discarding unsaved changes"""
        pass
