"""
Password reset notifiers

MailPasswordResetNotifier sends the reset link over SMTP with fastapi-mail.
DisabledPasswordResetNotifier is used when mail is not configured: it
reports the link as undelivered without ever logging it.
"""

import logging

import aiosmtplib
from fastapi_mail import ConnectionConfig, FastMail, MessageSchema, MessageType
from fastapi_mail.errors import ConnectionErrors

from src.app.services.notifier import IPasswordResetNotifier

logger = logging.getLogger(__name__)

RESET_EMAIL_SUBJECT = "Password reset"

RESET_EMAIL_TEMPLATE = """\
<p>Hello {display_name},</p>
<p>We received a request to reset the password of your travel planner account.</p>
<p><a href="{reset_url}">Choose a new password</a></p>
<p>If you did not ask for this, you can ignore this email.</p>
"""


def build_mail_config(config) -> ConnectionConfig:
    return ConnectionConfig(
        MAIL_USERNAME=config.MAIL_USERNAME,
        MAIL_PASSWORD=config.MAIL_PASSWORD,
        MAIL_FROM=config.MAIL_FROM,
        MAIL_FROM_NAME=config.MAIL_FROM_NAME,
        MAIL_PORT=config.MAIL_PORT,
        MAIL_SERVER=config.MAIL_SERVER,
        MAIL_STARTTLS=config.MAIL_STARTTLS,
        MAIL_SSL_TLS=config.MAIL_SSL_TLS,
        USE_CREDENTIALS=bool(config.MAIL_USERNAME),
        VALIDATE_CERTS=True,
    )


class MailPasswordResetNotifier(IPasswordResetNotifier):
    def __init__(self, mail_config: ConnectionConfig):
        self.mailer = FastMail(mail_config)

    async def send_password_reset(
        self, recipient: str, reset_url: str, display_name: str
    ) -> bool:
        message = MessageSchema(
            subject=RESET_EMAIL_SUBJECT,
            recipients=[recipient],
            body=RESET_EMAIL_TEMPLATE.format(
                display_name=display_name, reset_url=reset_url
            ),
            subtype=MessageType.html,
        )
        try:
            await self.mailer.send_message(message)
        except (ConnectionErrors, aiosmtplib.SMTPException, OSError) as exc:
            # Connect/login failures arrive wrapped, send failures raw from aiosmtplib
            logger.error("Password reset email to %s failed: %s", recipient, exc)
            return False

        logger.info("Password reset email sent to %s", recipient)
        return True


class DisabledPasswordResetNotifier(IPasswordResetNotifier):
    async def send_password_reset(
        self, recipient: str, reset_url: str, display_name: str
    ) -> bool:
        logger.warning(
            "Mail is disabled (MAIL_ENABLED=false); password reset email to %s not sent",
            recipient,
        )
        return False
