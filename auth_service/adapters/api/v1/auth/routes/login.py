"""Login endpoint.

Responds in one of two ways after a correct password:
- 200 with the session token in the body and in the `jwt` cookie, or
- 206 with a `loginAttemptId` when the account requires a 2FA code. The code
  itself goes out by email.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from auth_service.adapters.api.v1.auth.dependencies import CurrentSettings, Orchestrator
from auth_service.adapters.api.v1.auth.schemas import (
    ErrorResponse,
    LoginRequest,
    TokenResponse,
    TwoFactorRequiredResponse,
)
from auth_service.adapters.api.v1.auth.utils import set_session_cookie

router = APIRouter()


@router.post(
    "",
    response_model=TokenResponse,
    status_code=status.HTTP_200_OK,
    summary="Authenticate with email and password",
    responses={
        206: {"model": TwoFactorRequiredResponse, "description": "2FA code required"},
        400: {"model": ErrorResponse, "description": "Invalid email or password format"},
        401: {"model": ErrorResponse, "description": "Incorrect credentials"},
        422: {"description": "Malformed request body"},
    },
)
async def login(
    payload: LoginRequest,
    orchestrator: Orchestrator,
    settings: CurrentSettings,
) -> JSONResponse:
    result = await orchestrator.login(payload.email, payload.password)

    if result.requires_2fa:
        body = TwoFactorRequiredResponse(login_attempt_id=result.login_attempt_id.value)
        return JSONResponse(
            status_code=status.HTTP_206_PARTIAL_CONTENT,
            content=body.model_dump(by_alias=True),
        )

    body = TokenResponse(message="Login successful!", token=result.token.expose_secret())
    response = JSONResponse(status_code=status.HTTP_200_OK, content=body.model_dump())
    set_session_cookie(response, result.token, settings)
    return response
