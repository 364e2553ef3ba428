from typing import Any, Dict
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Request, Response, status

from src.api.error import raise_for_error
from src.app.services.mailer import IMailer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    CurrentUser,
    LoginCommand,
    LoginResponse,
    LoginUseCase,
    LogoutUseCase,
)
from src.depends import get_current_user, get_mailer, get_unit_of_work

router = APIRouter(prefix="/session", tags=["Session"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=LoginResponse)
async def create_session(
    request: Request,
    params: Dict[str, Any] = Body(..., examples=[{"email": "user@example.com", "password": "secret123"}]),
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: IMailer = Depends(get_mailer),
):
    """
    Sign In

    Authenticates by the configured auth field and password and returns a
    JWT bound to a new session.

    Raises:
        - 422 Unprocessable Entity: session invalid, account locked or unconfirmed
        - 500 Internal Server Error: Server error
    """
    command = LoginCommand(
        params=params,
        ip_address=request.client.host if request.client else None,
    )
    result = await LoginUseCase(uow, mailer).execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def destroy_session(
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Sign Out

    Removes the bearer's auth token; other sessions stay active.

    Raises:
        - 401 Unauthorized: Invalid token or session already ended
    """
    result = await LogoutUseCase(uow).execute(
        UUID(current_user.user.id), current_user.auth_token
    )

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
