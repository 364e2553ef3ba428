import secrets
import uuid
from datetime import UTC, datetime


def generate_uuid() -> str:
    return str(uuid.uuid4())


def generate_token() -> str:
    return secrets.token_urlsafe(32)


def utcnow() -> datetime:
    # Naive UTC, matching what the DateTime columns hand back
    return datetime.now(UTC).replace(tzinfo=None)
