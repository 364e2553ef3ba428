"""
Login Use Case

Authenticates a user and issues a JWT bound to a new session auth token.
"""

import logging

import bcrypt

from config import ApplicationConfig
from libs.result import Result, Return
from src.api.utils.jwt import generate_jwt
from src.app.services.instructions import send_unlock_instructions
from src.app.services.mailer import IMailer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from src.domain.errors import FieldErrors
from .dtos import LoginCommand, LoginResponse, SessionInfo
from .errors import validation_error
from .user_from_email import normalize_email

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Unknown email and wrong password both fail with session "invalid"
    - Locked users fail with "locked" before the password is checked
    - An expired time-based lock is lifted on the next sign-in
    - Wrong passwords count toward the lockout threshold
    - Unconfirmed users fail with "unconfirmed"
    - Success appends a session auth token and records sign-in tracking
    """

    def __init__(self, uow: UnitOfWork, mailer: IMailer):
        self.uow = uow
        self.mailer = mailer

    @staticmethod
    def _invalid() -> Result[LoginResponse]:
        return Return.err(validation_error(FieldErrors().add("session", "invalid")))

    async def execute(self, command: LoginCommand) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            command: Raw params (auth field + password) and client IP

        Returns:
            Result with LoginResponse containing the JWT, or Error
        """
        async with self.uow:
            field_name = User.auth_field_name()
            email = normalize_email(command.params, field_name)
            password = command.params.get("password")
            if not isinstance(password, str):
                password = None

            user = await self.uow.users.find_by(field_name, email) if email else None

            if user is None:
                # Keep timing close to the wrong-password path
                bcrypt.checkpw(b"dummy_password", bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS))
                return self._invalid()

            if user.lock_expired():
                user.unlock_access()
                await self.uow.users.update(user)
                await self.uow.commit()

            if user.access_locked():
                return Return.err(validation_error(FieldErrors().add(field_name, "locked")))

            if not user.check_password(password):
                locked = user.failed_attempt()
                await self.uow.users.update(user)
                await self.uow.commit()

                if locked:
                    logger.info("User %s locked after %s failed attempts", user.id, user.failed_attempts)
                    await send_unlock_instructions(self.mailer, user)
                    return Return.err(validation_error(FieldErrors().add(field_name, "locked")))
                return self._invalid()

            if not user.is_confirmed():
                return Return.err(validation_error(FieldErrors().add(field_name, "unconfirmed")))

            auth_token = user.regenerate_auth_token()
            user.reset_failed_attempts()
            user.track_sign_in(command.ip_address)
            await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(
                LoginResponse(session=SessionInfo(jwt=generate_jwt(user.id, auth_token)))
            )
