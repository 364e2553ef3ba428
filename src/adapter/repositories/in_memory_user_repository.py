import copy
from typing import Any, Dict, Optional
from uuid import UUID

from src.app.repositories.user_repository import IUserRepository
from src.domain.base import utcnow
from src.domain.entities import User


class InMemoryStore:
    """
    Process-local document store for user records.

    Rows are kept as plain dicts so callers never share state with the store;
    every read hands back a fresh User.
    """

    def __init__(self):
        self.users: Dict[UUID, dict] = {}

    def clear(self) -> None:
        self.users.clear()


def _to_row(user: User) -> dict:
    return copy.deepcopy(user.model_dump())


def _to_user(row: dict) -> User:
    return User(**copy.deepcopy(row))


class InMemoryUserRepository(IUserRepository):
    """User repository implementation backed by an InMemoryStore"""

    def __init__(self, store: InMemoryStore, pending: Dict[UUID, dict]):
        self.store = store
        self.pending = pending

    def _rows(self):
        rows = dict(self.store.users)
        rows.update(self.pending)
        return rows.values()

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        row = self.pending.get(user_id) or self.store.users.get(user_id)
        return _to_user(row) if row is not None else None

    async def find_by(self, field: str, value: Any) -> Optional[User]:
        """Get the oldest user whose ``field`` equals ``value``"""
        if field not in User.model_fields:
            raise AttributeError(f"User has no field {field!r}")
        matches = [row for row in self._rows() if row.get(field) == value]
        if not matches:
            return None
        return _to_user(min(matches, key=lambda row: row["created_at"]))

    async def create(self, user: User) -> User:
        """Create a new user"""
        email = user.email
        for row in self._rows():
            if row["email"] == email and row["id"] != user.id:
                raise ValueError(f"Duplicate email: {email}")
        self.pending[user.id] = _to_row(user)
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        user.updated_at = utcnow()
        self.pending[user.id] = _to_row(user)
        return user

    async def reload(self, user: User) -> Optional[User]:
        """Re-read a user from the store, discarding unsaved changes"""
        self.pending.pop(user.id, None)
        return await self.get_by_id(user.id)
