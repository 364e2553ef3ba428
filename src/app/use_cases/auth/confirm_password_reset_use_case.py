"""
Confirm Password Reset Use Case

Consumes a reset-password token and sets the new password.
"""

import logging

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import ResetPasswordCommand
from .errors import not_found_error, validation_error

logger = logging.getLogger(__name__)


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - Token must belong to a user ("not_found" otherwise)
    - Password must be present ("blank") and long enough ("too_short")
    - password_confirmation, when given, must match ("confirmation")
    - Token must not be expired ("expired")
    - On failure the user is left unchanged
    - On success the token, its timestamp and all session tokens are cleared
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: ResetPasswordCommand) -> Result[None]:
        """
        Execute confirm password reset use case.

        Args:
            command: Token from the email plus the new password

        Returns:
            Result with None on success, or Error

        Errors:
            - NOT_FOUND: No user holds this token
            - VALIDATION_FAILED: Field errors on password or token
        """
        async with self.uow:
            if not command.token:
                return Return.err(not_found_error("reset_password_token"))

            user = await self.uow.users.find_by("reset_password_token", command.token)
            if user is None:
                return Return.err(not_found_error("reset_password_token"))

            errors = user.set_reset_password(
                command.password, command.password_confirmation
            )
            if errors:
                return Return.err(validation_error(errors))

            await self.uow.users.update(user)
            await self.uow.commit()

            logger.info("Password reset for user %s; sessions cleared", user.id)
            return Return.ok(None)
