from fastapi import BackgroundTasks, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.repositories.in_memory_user_repository import InMemoryStore
from src.adapter.services.in_memory_unit_of_work import InMemoryUnitOfWork
from src.adapter.services.smtp_mailer import SmtpMailer
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.mailer import IMailer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AuthenticateUseCase, CurrentUser

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

memory_store = InMemoryStore()

security = HTTPBearer()


async def init_models() -> None:
    if ApplicationConfig.PERSISTENCE_BACKEND != "sql":
        return
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_unit_of_work():
    if ApplicationConfig.PERSISTENCE_BACKEND == "memory":
        yield InMemoryUnitOfWork(memory_store)
        return
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_mailer(background_tasks: BackgroundTasks) -> IMailer:
    return SmtpMailer(background_tasks)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> CurrentUser:
    """
    Dependency to resolve the bearer JWT into the signed-in user.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        CurrentUser holding the User and the session's auth token

    Raises:
        HTTPException: 401 if the token is invalid, expired or signed out
    """
    result = await AuthenticateUseCase(uow).execute(credentials.credentials)

    if result.is_err():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=result.error.message,
        )

    return result.value
