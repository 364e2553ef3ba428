"""
User Entity

The user record the authentication behaviors are mixed into.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow
from src.domain.concerns import (
    AuthenticatableMixin,
    ConfirmableMixin,
    LockableMixin,
    RecoverableMixin,
    TrackableMixin,
)


class User(
    AuthenticatableMixin,
    ConfirmableMixin,
    RecoverableMixin,
    LockableMixin,
    TrackableMixin,
    SQLModel,
    table=True,
):
    """
    User entity - a record carrying credentials and their lifecycle state.

    Business Rules:
    - Email must be unique across all users
    - Password stored as bcrypt hash
    - auth_tokens holds the active sessions, oldest first
    - Token fields and their *_sent_at timestamps are set and cleared together
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(default="", max_length=60)  # Bcrypt output is 60 chars

    # Sessions
    auth_tokens: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    # Confirmable
    confirmation_token: Optional[str] = Field(
        default=None, unique=True, index=True, max_length=64
    )
    confirmation_sent_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )
    confirmed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Recoverable
    reset_password_token: Optional[str] = Field(
        default=None, unique=True, index=True, max_length=64
    )
    reset_password_sent_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    # Lockable
    failed_attempts: int = Field(default=0)
    first_failed_attempt_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )
    locked_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    unlock_token: Optional[str] = Field(
        default=None, unique=True, index=True, max_length=64
    )

    # Trackable
    last_sign_in_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    last_sign_in_ip: Optional[str] = Field(default=None, max_length=45)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_confirmed_at", "confirmed_at"),)
