"""
Request Password Reset Use Case

Looks up the user from the submitted email and sends reset instructions.
"""

import logging
from typing import Any, Mapping

from config import ApplicationConfig
from libs.result import Result, Return
from src.app.services.instructions import send_reset_password_instructions
from src.app.services.mailer import IMailer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from src.domain.errors import FieldErrors
from .errors import validation_error
from .user_from_email import find_user_from_email

logger = logging.getLogger(__name__)


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - Email is trimmed (and lowercased when DOWNCASE_AUTH_FIELD) before lookup
    - Blank email fails with "blank", malformed email with "format"
    - Unknown email succeeds silently when AVOID_EMAIL_ERRORS, else "not_found"
    - Unconfirmed or locked users are refused: no token, no email
    - Email delivery is deferred when DELIVER_LATER is set
    """

    def __init__(self, uow: UnitOfWork, mailer: IMailer):
        self.uow = uow
        self.mailer = mailer

    async def execute(self, params: Mapping[str, Any]) -> Result[None]:
        """
        Execute request password reset use case.

        Args:
            params: Request body keyed by the configured auth field

        Returns:
            Result with None on success, or a VALIDATION_FAILED Error

        Raises:
            InvalidEmailField: the configured auth field is not a User attribute
        """
        async with self.uow:
            lookup = await find_user_from_email(self.uow.users, params)
            if lookup.is_err():
                return Return.err(lookup.error)

            user = lookup.value
            if user is None:
                if ApplicationConfig.AVOID_EMAIL_ERRORS:
                    return Return.ok(None)
                return Return.err(
                    validation_error(FieldErrors().add(User.auth_field_name(), "not_found"))
                )

            errors = await send_reset_password_instructions(self.uow, self.mailer, user)
            if errors:
                logger.info("Reset password refused for user %s: %s", user.id, errors)
                return Return.err(validation_error(errors))

            return Return.ok(None)
