"""Email configuration for delivering 2FA codes out of band.
"""

from typing import Literal, Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings


class EmailSettings(BaseSettings):
    """Email configuration settings.

    EMAIL_BACKEND selects the delivery channel: "mock" logs that a message
    was sent without contacting any server, "smtp" delivers through
    fastapi-mail.

    Attributes:
        EMAIL_SMTP_HOST: SMTP server hostname
        EMAIL_SMTP_PORT: SMTP server port (587 for STARTTLS, 465 for SSL)
        EMAIL_SMTP_USERNAME: SMTP authentication username
        EMAIL_SMTP_PASSWORD: SMTP authentication password (SecretStr)
        EMAIL_FROM_EMAIL: Sender address
        EMAIL_FROM_NAME: Sender display name
    """

    EMAIL_BACKEND: Literal["mock", "smtp"] = "mock"
    EMAIL_SMTP_HOST: str = "localhost"
    EMAIL_SMTP_PORT: int = Field(default=587, ge=1, le=65535)
    EMAIL_SMTP_USERNAME: Optional[str] = None
    EMAIL_SMTP_PASSWORD: Optional[SecretStr] = None
    EMAIL_SMTP_USE_STARTTLS: bool = True
    EMAIL_SMTP_USE_SSL: bool = False
    EMAIL_FROM_EMAIL: str = "no-reply@example.com"
    EMAIL_FROM_NAME: str = "Auth Service"
