"""Request bodies.

These models only check shape and types. Domain rules (email format,
password length, code format) are enforced by the value objects so that a
well-typed but invalid value yields 400 rather than 422.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _Request(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=False)


class SignupRequest(_Request):
    email: str = Field(..., examples=["user@example.com"])
    password: str = Field(..., examples=["correct-horse-battery"])
    requires_2fa: bool = Field(..., alias="requires2FA")


class LoginRequest(_Request):
    email: str = Field(..., examples=["user@example.com"])
    password: str


class Verify2FARequest(_Request):
    email: str
    login_attempt_id: str = Field(..., alias="loginAttemptId")
    two_fa_code: str = Field(..., alias="2FACode", examples=["123456"])


class LogoutRequest(_Request):
    token: Optional[str] = None


class VerifyTokenRequest(_Request):
    token: str
