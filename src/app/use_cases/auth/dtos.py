"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


# ============================================================================
# Command DTOs
# ============================================================================


class LoginCommand(BaseModel):
    """Sign-in intent: raw params keyed by the configured auth field"""

    params: Dict[str, Any]
    ip_address: Optional[str] = None


class SignupCommand(BaseModel):
    """Registration intent: raw params keyed by the configured auth field"""

    params: Dict[str, Any]


class ResetPasswordCommand(BaseModel):
    """Reset-password completion intent"""

    token: str
    password: Optional[str] = None
    password_confirmation: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class SessionInfo(BaseModel):
    """JWT issued for a session"""

    jwt: str


class LoginResponse(BaseModel):
    """Response for user login use case"""

    session: SessionInfo


class UserInfo(BaseModel):
    """Public user information"""

    id: str
    email: str
    confirmed: bool
    last_sign_in_at: Optional[datetime] = None


class SignupResponse(BaseModel):
    """Response for registration use case"""

    user: UserInfo


class CurrentUser(BaseModel):
    """Authenticated request context"""

    user: UserInfo
    auth_token: str = Field(..., description="Auth token carried by the JWT")


def user_info(user) -> UserInfo:
    return UserInfo(
        id=str(user.id),
        email=user.email,
        confirmed=user.is_confirmed(),
        last_sign_in_at=user.last_sign_in_at,
    )
