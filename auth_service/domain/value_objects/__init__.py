"""Domain value objects. Every one validates on construction and is immutable."""

from .email import Email
from .login_attempt_id import LoginAttemptId
from .password import HashedPassword, Password
from .token import Token
from .two_fa_code import TwoFACode

__all__ = [
    "Email",
    "HashedPassword",
    "LoginAttemptId",
    "Password",
    "Token",
    "TwoFACode",
]
