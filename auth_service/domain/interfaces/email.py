"""Outbound email interface used to deliver 2FA codes out of band."""

from abc import ABC, abstractmethod

from auth_service.domain.value_objects import Email


class IEmailClient(ABC):
    """Interface for sending a plain message to a single recipient."""

    @abstractmethod
    async def send_email(self, recipient: Email, subject: str, content: str) -> None:
        """Sends one email.

        Args:
            recipient: Destination address.
            subject: Subject line.
            content: Plain-text body.

        Raises:
            EmailServiceError: If the message could not be delivered.
        """
        raise NotImplementedError
