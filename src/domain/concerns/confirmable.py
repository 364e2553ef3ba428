"""
Confirmable Behavior

Email confirmation gate for user records.
"""

from datetime import datetime
from typing import Optional

from config import ApplicationConfig
from src.domain.base import generate_token, utcnow
from src.domain.errors import FieldErrors
from src.domain.expiration import token_expired


class ConfirmableMixin:
    """
    Business Rules:
    - confirmation_token and confirmation_sent_at are set and cleared together
    - Token expires after CONFIRMATION_EXPIRATION_TIME seconds (0 = never)
    - Already confirmed records cannot be re-sent instructions
    """

    def is_confirmed(self) -> bool:
        return self.confirmed_at is not None

    def expired_confirmation_token(self, now: Optional[datetime] = None) -> bool:
        return token_expired(
            self.confirmation_sent_at,
            ApplicationConfig.CONFIRMATION_EXPIRATION_TIME,
            now or utcnow(),
        )

    def generate_confirmation_token(self, now: Optional[datetime] = None) -> FieldErrors:
        errors = FieldErrors()
        if self.is_confirmed():
            errors.add(self.auth_field_name(), "already_confirmed")
            return errors

        self.confirmation_token = generate_token()
        self.confirmation_sent_at = now or utcnow()
        return errors

    def confirm(self, now: Optional[datetime] = None) -> FieldErrors:
        now = now or utcnow()
        errors = FieldErrors()
        if self.expired_confirmation_token(now):
            errors.add("confirmation_token", "expired")
            return errors

        self.confirmed_at = now
        self.confirmation_token = None
        self.confirmation_sent_at = None
        return errors
