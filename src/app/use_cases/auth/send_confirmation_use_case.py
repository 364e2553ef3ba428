"""
Send Confirmation Use Case

Re-sends email confirmation instructions with a fresh token.
"""

from typing import Any, Mapping

from config import ApplicationConfig
from libs.result import Result, Return
from src.app.services.instructions import send_confirmation_instructions
from src.app.services.mailer import IMailer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from src.domain.errors import FieldErrors
from .errors import validation_error
from .user_from_email import find_user_from_email


class SendConfirmationUseCase:
    """
    Use case for resending confirmation instructions.

    Business Rules:
    - Email lookup follows the same blank/format rules as password reset
    - Unknown email succeeds silently when AVOID_EMAIL_ERRORS, else "not_found"
    - Already confirmed users fail with "already_confirmed"
    - A new token replaces the old one and restarts the expiry window
    """

    def __init__(self, uow: UnitOfWork, mailer: IMailer):
        self.uow = uow
        self.mailer = mailer

    async def execute(self, params: Mapping[str, Any]) -> Result[None]:
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

            errors = await send_confirmation_instructions(self.uow, self.mailer, user)
            if errors:
                return Return.err(validation_error(errors))

            return Return.ok(None)
