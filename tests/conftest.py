import pytest

from config import ApplicationConfig


@pytest.fixture(autouse=True)
def fast_password_hashing(monkeypatch):
    # Minimum bcrypt cost keeps the suite fast
    monkeypatch.setattr(ApplicationConfig, "BCRYPT_ROUNDS", 4)
