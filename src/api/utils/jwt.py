from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig


def generate_jwt(user_id: UUID, auth_token: str) -> str:
    """
    Generate JWT session token

    Args:
        user_id: User UUID
        auth_token: Session auth token stored in user.auth_tokens

    Returns:
        JWT token string (HS256, JWT_EXPIRATION_TIME seconds expiry)
    """
    now = datetime.now(UTC)
    payload = {
        "sub": str(user_id),
        "auth_token": auth_token,
        "exp": now + timedelta(seconds=ApplicationConfig.JWT_EXPIRATION_TIME),
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"]
        )
    except JWTError:
        return None
    if not payload.get("sub") or not payload.get("auth_token"):
        return None
    return payload
