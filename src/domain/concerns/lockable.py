"""
Lockable Behavior

Failure-count based account lockout.
"""

from datetime import datetime, timedelta
from typing import Optional

from config import ApplicationConfig
from src.domain.base import generate_token, utcnow


class LockableMixin:
    """
    Business Rules:
    - Locking is enabled by the "failed_attempts" lock strategy
    - Reaching MAXIMUM_ATTEMPTS consecutive failures locks the account
    - Failures older than RESET_ATTEMPTS_IN restart the count
    - With the "time" unlock strategy a lock expires after UNLOCK_IN seconds
    - With the "email" unlock strategy locking issues an unlock_token
    """

    @staticmethod
    def lock_strategy_enabled(strategy: str) -> bool:
        return strategy in (ApplicationConfig.LOCK_STRATEGIES or [])

    @staticmethod
    def unlock_strategy_enabled(strategy: str) -> bool:
        return strategy in (ApplicationConfig.UNLOCK_STRATEGIES or [])

    def lock_expired(self, now: Optional[datetime] = None) -> bool:
        if self.locked_at is None or not self.unlock_strategy_enabled("time"):
            return False
        now = now or utcnow()
        return self.locked_at + timedelta(seconds=ApplicationConfig.UNLOCK_IN) < now

    def access_locked(self, now: Optional[datetime] = None) -> bool:
        return self.locked_at is not None and not self.lock_expired(now)

    def lock_access(self, now: Optional[datetime] = None) -> Optional[str]:
        """Lock the record; returns the unlock token when one was issued."""
        self.locked_at = now or utcnow()
        if self.unlock_strategy_enabled("email"):
            self.unlock_token = generate_token()
            return self.unlock_token
        return None

    def unlock_access(self) -> None:
        self.locked_at = None
        self.failed_attempts = 0
        self.first_failed_attempt_at = None
        self.unlock_token = None

    def failed_attempt(self, now: Optional[datetime] = None) -> bool:
        """
        Register a failed sign-in.

        Returns:
            True when this failure locked the record
        """
        if not self.lock_strategy_enabled("failed_attempts") or self.access_locked(now):
            return False

        now = now or utcnow()
        window = timedelta(seconds=ApplicationConfig.RESET_ATTEMPTS_IN)
        if (
            self.first_failed_attempt_at is None
            or self.first_failed_attempt_at + window < now
        ):
            self.failed_attempts = 1
            self.first_failed_attempt_at = now
        else:
            self.failed_attempts = (self.failed_attempts or 0) + 1

        if self.failed_attempts >= ApplicationConfig.MAXIMUM_ATTEMPTS:
            self.lock_access(now)
            return True
        return False

    def reset_failed_attempts(self) -> None:
        self.failed_attempts = 0
        self.first_failed_attempt_at = None
