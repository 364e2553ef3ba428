from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork


class LogoutUseCase:
    """Use case for ending a session by removing its auth token"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, auth_token: str) -> Result[None]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None or not user.destroy_auth_token(auth_token):
                return Return.err(Error("UNAUTHORIZED", "Session not found"))

            await self.uow.users.update(user)
            await self.uow.commit()
            return Return.ok(None)
