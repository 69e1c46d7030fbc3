"""User Logout Domain Service.

Logout revokes a session token by adding it to the banned-token set. Only a
token that currently verifies can be banned; an expired or forged token is
rejected as invalid.
"""

import structlog

from auth_service.core.exceptions import (
    MalformedTokenError,
    TokenAlreadyBannedError,
    ValidationError,
)
from auth_service.domain.interfaces import IBannedTokenStore, ITokenService
from auth_service.domain.value_objects import Token

logger = structlog.get_logger(__name__)


class UserLogoutService:
    """Domain service for token revocation.

    Args:
        banned_token_store: The set of revoked tokens.
        token_service: Verifies the token before it is banned.
    """

    def __init__(self, banned_token_store: IBannedTokenStore, token_service: ITokenService):
        self._banned_token_store = banned_token_store
        self._token_service = token_service

    async def logout(self, token: str) -> None:
        """Revokes a session token.

        Logging out twice with the same token succeeds both times.

        Raises:
            InvalidTokenError: If the token is malformed, forged or expired.
            UnexpectedError: If the store fails.
        """
        try:
            parsed_token = Token.parse(token)
        except ValidationError as e:
            raise MalformedTokenError() from e

        claims = self._token_service.verify(parsed_token)

        try:
            await self._banned_token_store.add_token(parsed_token)
        except TokenAlreadyBannedError:
            logger.debug("Token already banned", token=parsed_token.mask_for_logging())

        logger.info("User logged out", email=claims.subject.mask_for_logging())
