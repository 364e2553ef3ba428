from uuid import UUID

from libs.result import Error, Result, Return
from src.api.utils.jwt import verify_jwt
from src.app.services.unit_of_work import UnitOfWork
from .dtos import CurrentUser, user_info


class AuthenticateUseCase:
    """
    Use case resolving a bearer JWT into the signed-in user.

    Business Rules:
    - JWT must verify and carry both "sub" and "auth_token"
    - The auth token must still be listed on the user (not signed out,
      not dropped by a password reset or the session limit)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[CurrentUser]:
        payload = verify_jwt(token)
        if payload is None:
            return Return.err(Error("UNAUTHORIZED", "Invalid or expired token"))

        try:
            user_id = UUID(payload["sub"])
        except ValueError:
            return Return.err(Error("UNAUTHORIZED", "Invalid or expired token"))

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)

            if user is None or not user.has_auth_token(payload["auth_token"]):
                return Return.err(Error("UNAUTHORIZED", "Invalid or expired token"))

            return Return.ok(
                CurrentUser(user=user_info(user), auth_token=payload["auth_token"])
            )
