"""HS256 session tokens with PyJWT.

Tokens carry four claims: `sub` (the email), `iat`, `exp` and a random `jti`
that keeps every issued token distinct. The signing secret is injected at
construction and only ever handed to PyJWT.
"""

import uuid
from datetime import datetime, timedelta, timezone

import jwt
from pydantic import SecretStr
from structlog import get_logger

from auth_service.core.exceptions import (
    MalformedTokenError,
    TokenExpiredError,
    TokenSignatureError,
    UnexpectedError,
    ValidationError,
)
from auth_service.domain.interfaces import Claims, ITokenService
from auth_service.domain.value_objects import Email, Token

logger = get_logger(__name__)


class JWTTokenService(ITokenService):
    """Issues and verifies HMAC-signed JWTs.

    Args:
        secret: HMAC signing key.
        ttl: Token lifetime, 24 hours by default.
        algorithm: One of the HS* algorithms.
    """

    def __init__(
        self,
        secret: SecretStr,
        ttl: timedelta = timedelta(hours=24),
        algorithm: str = "HS256",
    ):
        if not secret.get_secret_value():
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self._ttl = ttl
        self._algorithm = algorithm

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, email: Email) -> Token:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": email.value,
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
            "jti": str(uuid.uuid4()),
        }
        try:
            encoded = jwt.encode(payload, self._secret.get_secret_value(), algorithm=self._algorithm)
        except jwt.PyJWTError as e:
            logger.error("Token signing failed", error=str(e))
            raise UnexpectedError() from e
        token = Token(encoded)
        logger.debug("Token issued", email=email.mask_for_logging(), token=token.mask_for_logging())
        return token

    def verify(self, token: Token) -> Claims:
        try:
            payload = jwt.decode(
                token.expose_secret(),
                self._secret.get_secret_value(),
                algorithms=[self._algorithm],
                options={"require": ["sub", "iat", "exp", "jti"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError() from e
        except jwt.InvalidSignatureError as e:
            raise TokenSignatureError() from e
        except jwt.PyJWTError as e:
            raise MalformedTokenError() from e

        try:
            return Claims(
                subject=Email(payload["sub"]),
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
                token_id=str(uuid.UUID(payload["jti"])),
            )
        except (ValidationError, AttributeError, TypeError, ValueError, OverflowError) as e:
            raise MalformedTokenError() from e
