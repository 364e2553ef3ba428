from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.domain.base import utcnow
from src.domain.entities import User


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.find_by = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)
    return uow


@pytest.fixture
def mock_mailer():
    mailer = MagicMock()
    mailer.deliver = MagicMock()
    mailer.deliver_later = MagicMock()
    return mailer


@pytest.fixture
def make_user():
    def _make_user(password: str = "OldPass123!", confirmed: bool = True, **fields) -> User:
        fields.setdefault("email", "user@example.com")
        if confirmed:
            fields.setdefault("confirmed_at", utcnow() - timedelta(days=1))
        user = User(**fields)
        user.set_password(password)
        return user

    return _make_user
