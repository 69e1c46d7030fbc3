"""Authentication domain services, one per operation, and their facade."""

from .orchestrator import AuthenticationOrchestrator
from .token_verification_service import TokenVerificationService
from .two_factor_verification_service import TwoFactorVerificationService
from .user_authentication_service import LoginResult, UserAuthenticationService
from .user_logout_service import UserLogoutService
from .user_registration_service import UserRegistrationService

__all__ = [
    "AuthenticationOrchestrator",
    "LoginResult",
    "TokenVerificationService",
    "TwoFactorVerificationService",
    "UserAuthenticationService",
    "UserLogoutService",
    "UserRegistrationService",
]
