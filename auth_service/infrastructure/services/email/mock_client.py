"""Email client that records messages instead of sending them."""

from collections import deque
from typing import Deque, NamedTuple

from structlog import get_logger

from auth_service.domain.interfaces import IEmailClient
from auth_service.domain.value_objects import Email

logger = get_logger(__name__)

DEFAULT_MAX_RECORDED = 100


class SentEmail(NamedTuple):
    recipient: Email
    subject: str
    content: str


class MockEmailClient(IEmailClient):
    """Logs each message and keeps the most recent ones in `sent`.

    Only the last `max_recorded` messages are kept; older ones are dropped.
    The message body is not logged; it carries the 2FA code.
    """

    def __init__(self, max_recorded: int = DEFAULT_MAX_RECORDED):
        self.sent: Deque[SentEmail] = deque(maxlen=max_recorded)

    async def send_email(self, recipient: Email, subject: str, content: str) -> None:
        self.sent.append(SentEmail(recipient, subject, content))
        logger.info(
            "Email sent (mock)",
            to_email=recipient.mask_for_logging(),
            subject=subject,
            content_length=len(content),
        )
