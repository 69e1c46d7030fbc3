from pydantic import BaseModel, ConfigDict, Field


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


class TokenResponse(BaseModel):
    message: str
    token: str


class TwoFactorRequiredResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = "2FA required"
    login_attempt_id: str = Field(..., serialization_alias="loginAttemptId")


class VerifyTokenResponse(BaseModel):
    message: str
    email: str
