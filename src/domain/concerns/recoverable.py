"""
Recoverable Behavior

Reset-password token lifecycle for user records.
"""

from datetime import datetime
from typing import Optional

from config import ApplicationConfig
from src.domain.base import generate_token, utcnow
from src.domain.errors import FieldErrors
from src.domain.expiration import token_expired


class RecoverableMixin:
    """
    Business Rules:
    - A non-null reset_password_token implies a non-null reset_password_sent_at
    - Unconfirmed or locked records cannot request a reset
    - Token expires after RESET_PASSWORD_EXPIRATION_TIME seconds (0 = never)
    - Accepting a new password clears the token and every session token
    - On any validation failure the record is left untouched
    """

    def expired_reset_password_token(self, now: Optional[datetime] = None) -> bool:
        return token_expired(
            self.reset_password_sent_at,
            ApplicationConfig.RESET_PASSWORD_EXPIRATION_TIME,
            now or utcnow(),
        )

    def reset_password_request_errors(self, now: Optional[datetime] = None) -> FieldErrors:
        field_name = self.auth_field_name()
        errors = FieldErrors()
        if not self.is_confirmed():
            errors.add(field_name, "unconfirmed")
        if self.access_locked(now):
            errors.add(field_name, "locked")
        return errors

    def generate_reset_password_token(self, now: Optional[datetime] = None) -> str:
        self.reset_password_token = generate_token()
        self.reset_password_sent_at = now or utcnow()
        return self.reset_password_token

    def set_reset_password(
        self,
        password: Optional[str],
        password_confirmation: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> FieldErrors:
        errors = FieldErrors()
        if not password:
            errors.add("password", "blank")
        elif len(password) < ApplicationConfig.MIN_PASSWORD_LENGTH:
            errors.add("password", "too_short")

        if password_confirmation is not None and password_confirmation != password:
            errors.add("password_confirmation", "confirmation")

        if self.expired_reset_password_token(now):
            errors.add("reset_password_token", "expired")

        if errors:
            return errors

        self.set_password(password)
        self.reset_password_token = None
        self.reset_password_sent_at = None
        self.clear_auth_tokens()
        return errors
