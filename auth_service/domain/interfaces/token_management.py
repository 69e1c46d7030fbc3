"""Session token interface.

Key DDD Principles Applied:
- Ubiquitous Language: tokens are issued for an email and verified into claims
- Dependency Inversion: the signing algorithm and secret live in infrastructure
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from auth_service.domain.value_objects import Email, Token


@dataclass(frozen=True, slots=True)
class Claims:
    """The verified contents of a session token.

    Attributes:
        subject: The email the token was issued for.
        issued_at: When the token was signed (UTC).
        expires_at: When the token stops being valid (UTC).
        token_id: Unique identifier of this token (the `jti` claim).
    """

    subject: Email
    issued_at: datetime
    expires_at: datetime
    token_id: str


class ITokenService(ABC):
    """Interface for issuing and verifying signed session tokens."""

    @abstractmethod
    def issue(self, email: Email) -> Token:
        """Issues a signed token whose subject is `email`.

        Raises:
            UnexpectedError: If signing fails.
        """
        raise NotImplementedError

    @abstractmethod
    def verify(self, token: Token) -> Claims:
        """Verifies signature and expiry and returns the claims.

        This does not consult the banned-token set; that is the caller's job.

        Raises:
            MalformedTokenError: If the token cannot be decoded or lacks claims.
            TokenSignatureError: If the signature does not match the secret.
            TokenExpiredError: If the token has expired.
        """
        raise NotImplementedError
