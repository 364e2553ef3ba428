"""
Confirm Email Use Case

Handles email confirmation via the token sent by mail.
"""

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .errors import not_found_error, validation_error


class ConfirmEmailUseCase:
    """
    Use case for email confirmation.

    Business Rules:
    - Token must match a user's confirmation_token ("not_found")
    - Token must not be expired ("expired")
    - Sets confirmed_at and clears the token (single-use)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[None]:
        """
        Execute email confirmation use case.

        Args:
            token: Confirmation token from email link

        Returns:
            Result with None on success, or Error

        Errors:
            - NOT_FOUND: Token not found
            - VALIDATION_FAILED: Token has expired
        """
        async with self.uow:
            user = await self.uow.users.find_by("confirmation_token", token) if token else None
            if user is None:
                return Return.err(not_found_error("confirmation_token"))

            errors = user.confirm()
            if errors:
                return Return.err(validation_error(errors))

            await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(None)
