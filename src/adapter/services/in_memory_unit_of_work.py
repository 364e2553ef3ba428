from src.adapter.repositories.in_memory_user_repository import (
    InMemoryStore,
    InMemoryUserRepository,
)
from src.app.services.unit_of_work import UnitOfWork


class InMemoryUnitOfWork(UnitOfWork):
    """In-memory implementation of UnitOfWork pattern

    Writes are staged until commit; leaving the block discards anything
    that was not committed.
    """

    def __init__(self, store: InMemoryStore):
        self.store = store
        self.pending = {}

    async def __aenter__(self):
        self.pending = {}
        self.users = InMemoryUserRepository(self.store, self.pending)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        self.store.users.update(self.pending)
        self.pending.clear()

    async def rollback(self):
        self.pending.clear()
