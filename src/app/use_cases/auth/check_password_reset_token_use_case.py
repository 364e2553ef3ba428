from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import FieldErrors
from .errors import not_found_error


class CheckPasswordResetTokenUseCase:
    """Validates a reset-password token without consuming it"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[None]:
        async with self.uow:
            user = await self.uow.users.find_by("reset_password_token", token) if token else None
            if user is None:
                return Return.err(not_found_error("reset_password_token"))

            if user.expired_reset_password_token():
                return Return.err(
                    Error(
                        "TOKEN_EXPIRED",
                        "Password reset token has expired",
                        details=FieldErrors().add("reset_password_token", "expired").to_dict(),
                    )
                )

            return Return.ok(None)
