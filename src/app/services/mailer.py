"""
Mailer Service Interface

Outbound mail for credential lifecycle events, with synchronous and
deferred delivery.
"""

from abc import ABC, abstractmethod
from urllib.parse import urlencode

from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from config import ApplicationConfig


class MailMessage(BaseModel):
    """A rendered email ready for delivery"""

    recipient: str
    subject: str
    body: str


class IMailer(ABC):
    """Mailer interface - application layer"""

    @abstractmethod
    def deliver(self, message: MailMessage) -> None:
        """Send the message now"""
        pass

    @abstractmethod
    def deliver_later(self, message: MailMessage) -> None:
        """Queue the message to be sent after the current request"""
        pass


async def dispatch(mailer: IMailer, message: MailMessage) -> None:
    """
    Deliver using the mode selected by DELIVER_LATER.

    deliver is blocking I/O, so it runs in the threadpool instead of on the
    event loop.
    """
    if ApplicationConfig.DELIVER_LATER:
        mailer.deliver_later(message)
    else:
        await run_in_threadpool(mailer.deliver, message)


def _link(base_url: str, token: str) -> str:
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{urlencode({'token': token})}"


def confirmation_instructions(recipient: str, token: str) -> MailMessage:
    url = _link(ApplicationConfig.CONFIRM_EMAIL_URL, token)
    body = (
        "Welcome!\n\n"
        "You can confirm your account email through the link below:\n"
        f"{url}\n"
    )
    return MailMessage(recipient=recipient, subject="Confirmation instructions", body=body)


def reset_password_instructions(recipient: str, token: str) -> MailMessage:
    url = _link(ApplicationConfig.RESET_PASSWORD_URL, token)
    body = (
        "Hello,\n\n"
        "Someone has requested a link to change your password. "
        "You can do this through the link below:\n"
        f"{url}\n\n"
        "If you didn't request this, please ignore this email. "
        "Your password won't change until you access the link above and create a new one.\n"
    )
    return MailMessage(recipient=recipient, subject="Reset password instructions", body=body)


def unlock_instructions(recipient: str, token: str) -> MailMessage:
    url = _link(ApplicationConfig.UNLOCK_ACCOUNT_URL, token)
    body = (
        "Hello,\n\n"
        "Your account has been locked due to an excessive number of unsuccessful "
        "sign in attempts. Click the link below to unlock your account:\n"
        f"{url}\n"
    )
    return MailMessage(recipient=recipient, subject="Unlock instructions", body=body)
