"""Token Verification Domain Service.

A token is valid when it is not banned and its signature and expiry check
out. The ban check runs first.
"""

import structlog

from auth_service.core.exceptions import MalformedTokenError, TokenRevokedError, ValidationError
from auth_service.domain.interfaces import Claims, IBannedTokenStore, ITokenService
from auth_service.domain.value_objects import Token

logger = structlog.get_logger(__name__)


class TokenVerificationService:
    def __init__(self, banned_token_store: IBannedTokenStore, token_service: ITokenService):
        self._banned_token_store = banned_token_store
        self._token_service = token_service

    async def verify_token(self, token: str) -> Claims:
        """Verifies a session token and returns its claims.

        Raises:
            InvalidTokenError: If the token is malformed, revoked, forged or expired.
            UnexpectedError: If the banned-token store fails.
        """
        try:
            parsed_token = Token.parse(token)
        except ValidationError as e:
            raise MalformedTokenError() from e

        if await self._banned_token_store.contains_token(parsed_token):
            logger.info("Revoked token presented", token=parsed_token.mask_for_logging())
            raise TokenRevokedError()

        return self._token_service.verify(parsed_token)
