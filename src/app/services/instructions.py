"""
Credential Instructions

Persist a freshly issued token, then mail it to the record's auth field.
Mail goes out only after the commit succeeds.
"""

import logging

from src.app.services.mailer import (
    IMailer,
    confirmation_instructions,
    dispatch,
    reset_password_instructions,
    unlock_instructions,
)
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from src.domain.errors import FieldErrors

logger = logging.getLogger(__name__)


async def send_confirmation_instructions(
    uow: UnitOfWork, mailer: IMailer, user: User
) -> FieldErrors:
    errors = user.generate_confirmation_token()
    if errors:
        return errors

    await uow.users.update(user)
    await uow.commit()

    await dispatch(mailer, confirmation_instructions(user.auth_field_value(), user.confirmation_token))
    return errors


async def send_reset_password_instructions(
    uow: UnitOfWork, mailer: IMailer, user: User
) -> FieldErrors:
    """
    Issue a reset-password token and mail it.

    Unconfirmed or locked records are refused without any mutation or mail.

    Raises:
        InvalidEmailField: the configured auth field is not a User attribute
    """
    errors = user.reset_password_request_errors()
    if errors:
        return errors

    token = user.generate_reset_password_token()
    await uow.users.update(user)
    await uow.commit()

    logger.info("Reset password instructions issued for user %s", user.id)
    await dispatch(mailer, reset_password_instructions(user.auth_field_value(), token))
    return errors


async def send_unlock_instructions(mailer: IMailer, user: User) -> None:
    if not user.unlock_token:
        return
    await dispatch(mailer, unlock_instructions(user.auth_field_value(), user.unlock_token))
