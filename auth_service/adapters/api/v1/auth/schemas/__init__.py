"""Authentication API schemas.

Field aliases keep the wire names (`requires2FA`, `loginAttemptId`,
`2FACode`) while the Python attributes stay snake_case.
"""

from .requests import LoginRequest, LogoutRequest, SignupRequest, Verify2FARequest, VerifyTokenRequest
from .responses import (
    ErrorResponse,
    MessageResponse,
    TokenResponse,
    TwoFactorRequiredResponse,
    VerifyTokenResponse,
)

__all__ = [
    "ErrorResponse",
    "LoginRequest",
    "LogoutRequest",
    "MessageResponse",
    "SignupRequest",
    "TokenResponse",
    "TwoFactorRequiredResponse",
    "Verify2FARequest",
    "VerifyTokenRequest",
    "VerifyTokenResponse",
]
