"""SMTP email client built on fastapi-mail."""

from fastapi_mail import ConnectionConfig, FastMail, MessageSchema, MessageType
from structlog import get_logger

from auth_service.core.config.settings import Settings
from auth_service.core.exceptions import EmailServiceError
from auth_service.domain.interfaces import IEmailClient
from auth_service.domain.value_objects import Email

logger = get_logger(__name__)


class FastMailEmailClient(IEmailClient):
    """Delivers plain-text messages through the configured SMTP server.

    Args:
        fastmail: A configured `FastMail` instance.
    """

    def __init__(self, fastmail: FastMail):
        self._fastmail = fastmail

    @classmethod
    def from_settings(cls, settings: Settings) -> "FastMailEmailClient":
        """Builds the client from the EMAIL_* settings.

        Raises:
            EmailServiceError: If the SMTP configuration is invalid.
        """
        password = settings.EMAIL_SMTP_PASSWORD
        try:
            config = ConnectionConfig(
                MAIL_USERNAME=settings.EMAIL_SMTP_USERNAME or "",
                MAIL_PASSWORD=password.get_secret_value() if password else "",
                MAIL_FROM=settings.EMAIL_FROM_EMAIL,
                MAIL_PORT=settings.EMAIL_SMTP_PORT,
                MAIL_SERVER=settings.EMAIL_SMTP_HOST,
                MAIL_FROM_NAME=settings.EMAIL_FROM_NAME,
                MAIL_STARTTLS=settings.EMAIL_SMTP_USE_STARTTLS,
                MAIL_SSL_TLS=settings.EMAIL_SMTP_USE_SSL,
                USE_CREDENTIALS=bool(settings.EMAIL_SMTP_USERNAME and password),
                VALIDATE_CERTS=True,
            )
        except ValueError as e:
            logger.error("Failed to configure FastMail", error=str(e))
            raise EmailServiceError(f"Failed to configure email service: {e}") from e
        logger.info("FastMail configured", smtp_host=settings.EMAIL_SMTP_HOST)
        return cls(FastMail(config))

    async def send_email(self, recipient: Email, subject: str, content: str) -> None:
        message = MessageSchema(
            subject=subject,
            recipients=[recipient.value],
            body=content,
            subtype=MessageType.plain,
        )
        try:
            await self._fastmail.send_message(message)
        except Exception as e:
            logger.error(
                "Failed to send email",
                to_email=recipient.mask_for_logging(),
                subject=subject,
                error=str(e),
            )
            raise EmailServiceError(f"Failed to send email: {e}") from e
        logger.info("Email sent", to_email=recipient.mask_for_logging(), subject=subject)
