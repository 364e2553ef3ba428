from fastapi import APIRouter, Depends, Response, status

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import UnlockAccountUseCase
from src.depends import get_unit_of_work

router = APIRouter(prefix="/unlocks", tags=["Unlocks"])


@router.put("/{token}", status_code=status.HTTP_204_NO_CONTENT)
async def unlock_account(token: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Unlock Account

    Raises:
        - 404 Not Found: Unknown token
    """
    result = await UnlockAccountUseCase(uow).execute(token)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
