"""Authentication Orchestrator.

The single entry point the outer adapters talk to. It owns one domain
service per operation and delegates to it; all inputs are raw strings and
all outcomes are either a result or an `AuthServiceError` subclass.
"""

from auth_service.domain.entities.user import User
from auth_service.domain.interfaces import (
    Claims,
    IBannedTokenStore,
    IEmailClient,
    IPasswordHasher,
    ITokenService,
    ITwoFACodeStore,
    IUserStore,
)
from auth_service.domain.value_objects import Token

from .token_verification_service import TokenVerificationService
from .two_factor_verification_service import TwoFactorVerificationService
from .user_authentication_service import LoginResult, UserAuthenticationService
from .user_logout_service import UserLogoutService
from .user_registration_service import UserRegistrationService


class AuthenticationOrchestrator:
    """Facade composing the authentication domain services.

    Args:
        user_store: Account registry.
        banned_token_store: Revoked token set.
        two_fa_code_store: Pending challenges.
        password_hasher: argon2id hasher.
        token_service: Session token signer and verifier.
        email_client: Delivery channel for 2FA codes.
    """

    def __init__(
        self,
        user_store: IUserStore,
        banned_token_store: IBannedTokenStore,
        two_fa_code_store: ITwoFACodeStore,
        password_hasher: IPasswordHasher,
        token_service: ITokenService,
        email_client: IEmailClient,
    ):
        self._registration = UserRegistrationService(user_store, password_hasher)
        self._authentication = UserAuthenticationService(
            user_store, two_fa_code_store, token_service, email_client
        )
        self._two_factor = TwoFactorVerificationService(two_fa_code_store, token_service)
        self._logout = UserLogoutService(banned_token_store, token_service)
        self._verification = TokenVerificationService(banned_token_store, token_service)

    async def signup(self, email: str, password: str, requires_2fa: bool) -> User:
        return await self._registration.signup(email, password, requires_2fa)

    async def login(self, email: str, password: str) -> LoginResult:
        return await self._authentication.login(email, password)

    async def verify_2fa(self, email: str, login_attempt_id: str, code: str) -> Token:
        return await self._two_factor.verify_2fa(email, login_attempt_id, code)

    async def logout(self, token: str) -> None:
        await self._logout.logout(token)

    async def verify_token(self, token: str) -> Claims:
        return await self._verification.verify_token(token)
