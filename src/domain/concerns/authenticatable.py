"""
Authenticatable Behavior

Password hashing and the per-user list of session auth tokens.
"""

from typing import Optional

import bcrypt

from config import ApplicationConfig
from src.domain.base import generate_token
from src.domain.errors import InvalidEmailField


class AuthenticatableMixin:
    """
    Password and session-token handling for user records.

    Business Rules:
    - Password stored as bcrypt hash
    - Each sign-in appends a fresh auth token; the oldest tokens are dropped
      once SIMULTANEOUS_SESSIONS is exceeded
    - auth_tokens is always reassigned, never mutated in place, so the JSON
      column is flagged dirty
    """

    @classmethod
    def auth_field_name(cls) -> str:
        field_name = ApplicationConfig.EMAIL_FIELD_NAME
        if field_name not in cls.model_fields:
            raise InvalidEmailField(field_name)
        return field_name

    def auth_field_value(self) -> Optional[str]:
        return getattr(self, self.auth_field_name())

    def set_password(self, password: str) -> None:
        password_hash = bcrypt.hashpw(
            password.encode(), bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS)
        )
        self.password_hash = password_hash.decode()

    def check_password(self, password: Optional[str]) -> bool:
        if not isinstance(password, str) or not password or not self.password_hash:
            return False
        try:
            return bcrypt.checkpw(password.encode(), self.password_hash.encode())
        except ValueError:
            return False

    def regenerate_auth_token(self) -> str:
        token = generate_token()
        tokens = list(self.auth_tokens or []) + [token]
        limit = max(1, ApplicationConfig.SIMULTANEOUS_SESSIONS)
        self.auth_tokens = tokens[-limit:]
        return token

    def destroy_auth_token(self, token: str) -> bool:
        tokens = list(self.auth_tokens or [])
        if token not in tokens:
            return False
        tokens.remove(token)
        self.auth_tokens = tokens
        return True

    def has_auth_token(self, token: Optional[str]) -> bool:
        return bool(token) and token in (self.auth_tokens or [])

    def clear_auth_tokens(self) -> None:
        self.auth_tokens = []
