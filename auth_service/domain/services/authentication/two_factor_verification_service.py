"""Two-Factor Verification Domain Service.

Completes a login that was left in the ChallengeIssued state. The stored
challenge must match both the login attempt ID and the code. On success the
challenge is removed before the token is issued, so a code can be used once.
"""

import hmac

import structlog

from auth_service.core.exceptions import IncorrectCredentialsError, TwoFACodeNotFoundError
from auth_service.domain.interfaces import ITokenService, ITwoFACodeStore
from auth_service.domain.value_objects import Email, LoginAttemptId, Token, TwoFACode

logger = structlog.get_logger(__name__)


class TwoFactorVerificationService:
    def __init__(self, two_fa_code_store: ITwoFACodeStore, token_service: ITokenService):
        self._two_fa_code_store = two_fa_code_store
        self._token_service = token_service

    async def verify_2fa(self, email: str, login_attempt_id: str, code: str) -> Token:
        """Verifies a 2FA challenge and issues a session token.

        Raises:
            ValidationError: If any input is malformed.
            IncorrectCredentialsError: If there is no live challenge, or the
                login attempt ID or code does not match it.
            UnexpectedError: If the store fails.
        """
        parsed_email = Email.parse(email)
        parsed_attempt_id = LoginAttemptId.parse(login_attempt_id)
        parsed_code = TwoFACode.parse(code)

        try:
            stored_attempt_id, stored_code = await self._two_fa_code_store.get_code(parsed_email)
        except TwoFACodeNotFoundError as e:
            logger.info("2FA rejected", email=parsed_email.mask_for_logging(), reason=e.code)
            raise IncorrectCredentialsError() from e

        attempt_matches = hmac.compare_digest(
            stored_attempt_id.value.encode(), parsed_attempt_id.value.encode()
        )
        code_matches = hmac.compare_digest(stored_code.value.encode(), parsed_code.value.encode())
        if not (attempt_matches and code_matches):
            logger.info(
                "2FA rejected",
                email=parsed_email.mask_for_logging(),
                reason="mismatch",
            )
            raise IncorrectCredentialsError()

        await self._two_fa_code_store.remove_code(parsed_email)
        token = self._token_service.issue(parsed_email)
        logger.info("2FA verified", email=parsed_email.mask_for_logging())
        return token
