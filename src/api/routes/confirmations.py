from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Response, status

from src.api.error import raise_for_error
from src.app.services.mailer import IMailer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import ConfirmEmailUseCase, SendConfirmationUseCase
from src.depends import get_mailer, get_unit_of_work

router = APIRouter(prefix="/confirmations", tags=["Confirmations"])


@router.post("", status_code=status.HTTP_204_NO_CONTENT)
async def send_confirmation(
    params: Dict[str, Any] = Body(..., examples=[{"email": "user@example.com"}]),
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: IMailer = Depends(get_mailer),
):
    """
    Resend Confirmation Instructions

    Raises:
        - 422 Unprocessable Entity: blank/format email, already confirmed
    """
    result = await SendConfirmationUseCase(uow, mailer).execute(params)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{token}", status_code=status.HTTP_204_NO_CONTENT)
async def confirm_email(token: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Confirm Email

    Raises:
        - 404 Not Found: Unknown token
        - 422 Unprocessable Entity: Expired token
    """
    result = await ConfirmEmailUseCase(uow).execute(token)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
