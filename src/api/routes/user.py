from fastapi import APIRouter, Depends, status

from src.app.use_cases.auth import CurrentUser, UserInfo
from src.depends import get_current_user

router = APIRouter(tags=["User"])


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def get_me(current_user: CurrentUser = Depends(get_current_user)):
    """
    Current User

    Raises:
        - 401 Unauthorized: Invalid token or session ended
    """
    return current_user.user
