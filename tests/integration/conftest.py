from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.repositories.in_memory_user_repository import InMemoryStore
from src.adapter.services.in_memory_unit_of_work import InMemoryUnitOfWork
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.mailer import IMailer, MailMessage
from src.depends import get_mailer, get_unit_of_work
from src.domain.entities import User


class RecordingMailer(IMailer):
    """Mailer double that keeps every message instead of sending it"""

    def __init__(self):
        self.delivered: list[MailMessage] = []
        self.deferred: list[MailMessage] = []

    def deliver(self, message: MailMessage) -> None:
        self.delivered.append(message)

    def deliver_later(self, message: MailMessage) -> None:
        self.deferred.append(message)

    @property
    def messages(self) -> list[MailMessage]:
        return self.delivered + self.deferred


class Records:
    """Seeds and reads users through the backend under test"""

    def __init__(self, open_uow):
        self.open_uow = open_uow

    async def add(self, user):
        async with self.open_uow() as uow:
            await uow.users.create(user)
            await uow.commit()
        return user

    async def find(self, field: str, value):
        # Detached snapshot, readable after the unit of work rolls back
        async with self.open_uow() as uow:
            user = await uow.users.find_by(field, value)
            return User(**user.model_dump()) if user is not None else None


@pytest.fixture(params=["sql", "memory"])
def backend(request):
    return request.param


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def open_uow(backend, engine):
    store = InMemoryStore()
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)

    @asynccontextmanager
    async def _open():
        if backend == "memory":
            async with InMemoryUnitOfWork(store) as uow:
                yield uow
            return
        async with Session() as session:
            async with SqlAlchemyUnitOfWork(session) as uow:
                yield uow

    _open.store = store
    _open.session_factory = Session
    return _open


@pytest.fixture
def records(open_uow):
    return Records(open_uow)


@pytest.fixture
def mailer():
    return RecordingMailer()


@pytest.fixture(autouse=True)
def integration_config(monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "DELIVER_LATER", False)
    monkeypatch.setattr(ApplicationConfig, "AVOID_EMAIL_ERRORS", True)
    monkeypatch.setattr(ApplicationConfig, "DOWNCASE_AUTH_FIELD", False)


@pytest_asyncio.fixture
async def client(backend, open_uow, mailer):
    from src.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        if backend == "memory":
            yield InMemoryUnitOfWork(open_uow.store)
            return
        async with open_uow.session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_mailer] = lambda: mailer

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
