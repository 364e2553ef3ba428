import logging
import smtplib
from email.message import EmailMessage
from typing import Optional

from fastapi import BackgroundTasks

from config import ApplicationConfig
from src.app.services.mailer import IMailer, MailMessage

logger = logging.getLogger(__name__)


class SmtpMailer(IMailer):
    """SMTP implementation of the mailer; deferred sends ride on BackgroundTasks"""

    def __init__(self, background_tasks: Optional[BackgroundTasks] = None):
        self.background_tasks = background_tasks

    def deliver(self, message: MailMessage) -> None:
        if not ApplicationConfig.SMTP_HOST:
            logger.info(
                "SMTP disabled; skipping %r to %s", message.subject, message.recipient
            )
            return

        email = EmailMessage()
        email["From"] = ApplicationConfig.MAILER_SENDER
        email["To"] = message.recipient
        email["Subject"] = message.subject
        email.set_content(message.body)

        with smtplib.SMTP(ApplicationConfig.SMTP_HOST, ApplicationConfig.SMTP_PORT) as server:
            if ApplicationConfig.SMTP_USE_TLS:
                server.starttls()
            if ApplicationConfig.SMTP_USERNAME and ApplicationConfig.SMTP_PASSWORD:
                server.login(ApplicationConfig.SMTP_USERNAME, ApplicationConfig.SMTP_PASSWORD)
            server.send_message(email)
        logger.info("Sent %r to %s", message.subject, message.recipient)

    def deliver_later(self, message: MailMessage) -> None:
        if self.background_tasks is None:
            logger.warning("No background queue available; delivering %r now", message.subject)
            self.deliver(message)
            return
        self.background_tasks.add_task(self.deliver, message)
