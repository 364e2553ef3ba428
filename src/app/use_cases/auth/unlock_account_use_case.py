from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .errors import not_found_error


class UnlockAccountUseCase:
    """Use case for lifting a lockout with the token sent by mail"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[None]:
        async with self.uow:
            user = await self.uow.users.find_by("unlock_token", token) if token else None
            if user is None:
                return Return.err(not_found_error("unlock_token"))

            user.unlock_access()
            await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(None)
