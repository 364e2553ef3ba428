"""
User From Email

Extracts, normalizes and validates the auth field from request params and
locates the matching user.
"""

import re
from typing import Any, Mapping, Optional

from config import ApplicationConfig
from libs.result import Result, Return
from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import User
from src.domain.errors import FieldErrors
from .errors import validation_error


def normalize_email(params: Mapping[str, Any], field_name: str) -> str:
    email = str(params.get(field_name) or "").strip()
    if ApplicationConfig.DOWNCASE_AUTH_FIELD:
        email = email.lower()
    return email


async def find_user_from_email(
    users: IUserRepository, params: Mapping[str, Any]
) -> Result[Optional[User]]:
    """
    Look up a user by the configured auth field.

    Returns:
        Result with the first matching User, or None when no record matches.
        A blank or malformed value is a VALIDATION_FAILED error.

    Raises:
        InvalidEmailField: the configured auth field is not a User attribute
    """
    field_name = User.auth_field_name()
    email = normalize_email(params, field_name)

    if not email:
        return Return.err(validation_error(FieldErrors().add(field_name, "blank")))
    if not re.search(ApplicationConfig.EMAIL_REGEX, email):
        return Return.err(validation_error(FieldErrors().add(field_name, "format")))

    return Return.ok(await users.find_by(field_name, email))
