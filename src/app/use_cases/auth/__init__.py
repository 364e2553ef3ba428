"""
Authentication Use Cases

All authentication-related business logic.
"""

from .signup_use_case import SignupUseCase
from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .authenticate_use_case import AuthenticateUseCase
from .send_confirmation_use_case import SendConfirmationUseCase
from .confirm_email_use_case import ConfirmEmailUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .check_password_reset_token_use_case import CheckPasswordResetTokenUseCase
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .unlock_account_use_case import UnlockAccountUseCase
from .user_from_email import find_user_from_email
from .dtos import (
    CurrentUser,
    LoginCommand,
    LoginResponse,
    ResetPasswordCommand,
    SessionInfo,
    SignupCommand,
    SignupResponse,
    UserInfo,
    user_info,
)

__all__ = [
    # Use Cases
    "SignupUseCase",
    "LoginUseCase",
    "LogoutUseCase",
    "AuthenticateUseCase",
    "SendConfirmationUseCase",
    "ConfirmEmailUseCase",
    "RequestPasswordResetUseCase",
    "CheckPasswordResetTokenUseCase",
    "ConfirmPasswordResetUseCase",
    "UnlockAccountUseCase",
    "find_user_from_email",
    # DTOs - Commands
    "LoginCommand",
    "SignupCommand",
    "ResetPasswordCommand",
    # DTOs - Responses
    "LoginResponse",
    "SignupResponse",
    # DTOs - Nested Models
    "SessionInfo",
    "UserInfo",
    "CurrentUser",
    "user_info",
]
