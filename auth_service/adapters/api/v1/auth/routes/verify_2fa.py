"""2FA verification endpoint: completes a login that returned 206."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from auth_service.adapters.api.v1.auth.dependencies import CurrentSettings, Orchestrator
from auth_service.adapters.api.v1.auth.schemas import ErrorResponse, TokenResponse, Verify2FARequest
from auth_service.adapters.api.v1.auth.utils import set_session_cookie

router = APIRouter()


@router.post(
    "",
    response_model=TokenResponse,
    status_code=status.HTTP_200_OK,
    summary="Submit the emailed 2FA code",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid email, attempt ID or code format"},
        401: {"model": ErrorResponse, "description": "Wrong, consumed or superseded code"},
        422: {"description": "Malformed request body"},
    },
)
async def verify_2fa(
    payload: Verify2FARequest,
    orchestrator: Orchestrator,
    settings: CurrentSettings,
) -> JSONResponse:
    token = await orchestrator.verify_2fa(
        payload.email, payload.login_attempt_id, payload.two_fa_code
    )
    body = TokenResponse(message="2FA verified!", token=token.expose_secret())
    response = JSONResponse(status_code=status.HTTP_200_OK, content=body.model_dump())
    set_session_cookie(response, token, settings)
    return response
