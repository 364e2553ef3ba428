from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Response, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.services.mailer import IMailer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    CheckPasswordResetTokenUseCase,
    ConfirmPasswordResetUseCase,
    RequestPasswordResetUseCase,
    ResetPasswordCommand,
)
from src.depends import get_mailer, get_unit_of_work

router = APIRouter(prefix="/passwords", tags=["Passwords"])


@router.post("", status_code=status.HTTP_204_NO_CONTENT)
async def request_password_reset(
    params: Dict[str, Any] = Body(..., examples=[{"email": "user@example.com"}]),
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: IMailer = Depends(get_mailer),
):
    """
    Request Password Reset

    Issues a reset token and mails instructions to the user.

    Raises:
        - 422 Unprocessable Entity: blank/format email, unconfirmed or locked user,
          unknown email when email errors are not suppressed
        - 500 Internal Server Error: misconfigured auth field
    """
    result = await RequestPasswordResetUseCase(uow, mailer).execute(params)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{token}", status_code=status.HTTP_204_NO_CONTENT)
async def check_password_reset_token(
    token: str, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Check Password Reset Token

    Raises:
        - 404 Not Found: Unknown token
        - 410 Gone: Expired token
    """
    result = await CheckPasswordResetTokenUseCase(uow).execute(token)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


class SetPasswordRequest(BaseModel):
    """Set password HTTP request payload"""

    password: str | None = Field(default=None, description="New password")
    password_confirmation: str | None = Field(
        default=None, description="Must match password when given"
    )


@router.put("/{token}", status_code=status.HTTP_204_NO_CONTENT)
async def confirm_password_reset(
    token: str,
    request: SetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Confirm Password Reset

    Sets the new password, clears the token and ends every session.

    Raises:
        - 404 Not Found: Unknown token
        - 422 Unprocessable Entity: blank/short password, mismatch, expired token
    """
    command = ResetPasswordCommand(
        token=token,
        password=request.password,
        password_confirmation=request.password_confirmation,
    )
    result = await ConfirmPasswordResetUseCase(uow).execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
