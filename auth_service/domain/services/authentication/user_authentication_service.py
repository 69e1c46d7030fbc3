"""User Authentication Domain Service.

Handles the password step of login. Depending on the account, a successful
password check either ends in a session token or opens a 2FA challenge:

    Unauthenticated -> CredentialsChecked -> Authenticated
    Unauthenticated -> CredentialsChecked -> ChallengeIssued

Every credential failure (unknown email, wrong password) surfaces as the same
`IncorrectCredentialsError`, and both paths cost one argon2 verification, so
a caller cannot learn whether an email is registered.
"""

from dataclasses import dataclass
from typing import Optional

import structlog

from auth_service.core.exceptions import (
    AuthServiceError,
    IncorrectCredentialsError,
    InvalidCredentialsError,
    UnexpectedError,
    UserNotFoundError,
)
from auth_service.domain.interfaces import (
    IEmailClient,
    ITokenService,
    ITwoFACodeStore,
    IUserStore,
)
from auth_service.domain.value_objects import Email, LoginAttemptId, Password, Token, TwoFACode

logger = structlog.get_logger(__name__)

TWO_FA_EMAIL_SUBJECT = "2FA Code"


@dataclass(frozen=True, slots=True)
class LoginResult:
    """Outcome of a successful password check.

    Exactly one attribute is set: `token` when the account does not use 2FA,
    `login_attempt_id` when a challenge was issued. The code itself is only
    ever sent by email.
    """

    token: Optional[Token] = None
    login_attempt_id: Optional[LoginAttemptId] = None

    @property
    def requires_2fa(self) -> bool:
        return self.login_attempt_id is not None


class UserAuthenticationService:
    """Domain service for the password step of login.

    Args:
        user_store: Account registry; also verifies passwords.
        two_fa_code_store: Holds the pending challenge per email.
        token_service: Issues session tokens.
        email_client: Delivers 2FA codes.
    """

    def __init__(
        self,
        user_store: IUserStore,
        two_fa_code_store: ITwoFACodeStore,
        token_service: ITokenService,
        email_client: IEmailClient,
    ):
        self._user_store = user_store
        self._two_fa_code_store = two_fa_code_store
        self._token_service = token_service
        self._email_client = email_client

    async def login(self, email: str, password: str) -> LoginResult:
        """Checks credentials and either issues a token or opens a challenge.

        A new challenge replaces any pending one for the same email, which
        invalidates the earlier login attempt.

        Raises:
            ValidationError: If the email or password is malformed.
            IncorrectCredentialsError: If the credentials do not match an account.
            UnexpectedError: If a store or the token service fails.
        """
        parsed_email = Email.parse(email)
        parsed_password = Password.parse(password)

        try:
            await self._user_store.validate_user(parsed_email, parsed_password)
            user = await self._user_store.get_user(parsed_email)
        except (UserNotFoundError, InvalidCredentialsError) as e:
            logger.info(
                "Login rejected",
                email=parsed_email.mask_for_logging(),
                reason=e.code,
            )
            raise IncorrectCredentialsError() from e

        if not user.requires_2fa:
            token = self._token_service.issue(parsed_email)
            logger.info("Login succeeded", email=parsed_email.mask_for_logging())
            return LoginResult(token=token)

        login_attempt_id = LoginAttemptId.generate()
        code = TwoFACode.generate()
        try:
            await self._two_fa_code_store.add_code(parsed_email, login_attempt_id, code)
        except AuthServiceError:
            raise
        except Exception as e:
            logger.error("Failed to store 2FA code", error=str(e))
            raise UnexpectedError() from e

        await self._send_code(parsed_email, code)
        logger.info(
            "2FA challenge issued",
            email=parsed_email.mask_for_logging(),
            login_attempt_id=login_attempt_id.value,
        )
        return LoginResult(login_attempt_id=login_attempt_id)

    async def _send_code(self, email: Email, code: TwoFACode) -> None:
        # Delivery is best-effort; the challenge stands either way.
        try:
            await self._email_client.send_email(email, TWO_FA_EMAIL_SUBJECT, code.value)
        except Exception as e:
            logger.warning(
                "Failed to deliver 2FA code",
                email=email.mask_for_logging(),
                error_type=type(e).__name__,
            )
