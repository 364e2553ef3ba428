from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status

from src.api.error import raise_for_error
from src.app.services.mailer import IMailer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import SignupCommand, SignupResponse, SignupUseCase
from src.depends import get_mailer, get_unit_of_work

router = APIRouter(prefix="/registration", tags=["Registration"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=SignupResponse)
async def create_registration(
    params: Dict[str, Any] = Body(...),
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: IMailer = Depends(get_mailer),
):
    """
    User Registration

    Creates an unconfirmed user and mails confirmation instructions.

    Raises:
        - 422 Unprocessable Entity: blank/format/registered email, bad password
        - 500 Internal Server Error: Server error
    """
    result = await SignupUseCase(uow, mailer).execute(SignupCommand(params=params))

    if result.is_err():
        raise_for_error(result.error)

    return result.value
