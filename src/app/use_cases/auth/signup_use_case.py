"""
Signup Use Case

Registers a user and sends confirmation instructions.
"""

import logging

from config import ApplicationConfig
from libs.result import Result, Return
from src.app.services.instructions import send_confirmation_instructions
from src.app.services.mailer import IMailer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from src.domain.errors import FieldErrors
from .dtos import SignupCommand, SignupResponse, user_info
from .errors import validation_error
from .user_from_email import find_user_from_email, normalize_email

logger = logging.getLogger(__name__)


class SignupUseCase:
    """
    Use case for user registration.

    Business Rules:
    - Email is normalized and validated like every other email lookup
    - Email must be unique ("registered")
    - Password must be present and at least MIN_PASSWORD_LENGTH chars
    - password_confirmation, when given, must match
    - New users start unconfirmed; confirmation instructions are mailed
    """

    def __init__(self, uow: UnitOfWork, mailer: IMailer):
        self.uow = uow
        self.mailer = mailer

    async def execute(self, command: SignupCommand) -> Result[SignupResponse]:
        """
        Execute signup use case.

        Args:
            command: Raw params (auth field, password, password_confirmation)

        Returns:
            Result with SignupResponse, or a VALIDATION_FAILED Error
        """
        params = command.params
        field_name = User.auth_field_name()

        async with self.uow:
            errors = FieldErrors()

            lookup = await find_user_from_email(self.uow.users, params)
            if lookup.is_err():
                return Return.err(lookup.error)
            if lookup.value is not None:
                errors.add(field_name, "registered")

            password = params.get("password")
            confirmation = params.get("password_confirmation")
            if not isinstance(password, str) or not password:
                errors.add("password", "blank")
            elif len(password) < ApplicationConfig.MIN_PASSWORD_LENGTH:
                errors.add("password", "too_short")
            if confirmation is not None and confirmation != password:
                errors.add("password_confirmation", "confirmation")

            if errors:
                return Return.err(validation_error(errors))

            user = User(**{field_name: normalize_email(params, field_name)})
            user.set_password(password)
            user = await self.uow.users.create(user)

            await send_confirmation_instructions(self.uow, self.mailer, user)
            logger.info("Registered user %s", user.id)

            return Return.ok(SignupResponse(user=user_info(user)))
