"""Logout endpoint.

The token to revoke is taken from the request body when present, otherwise
from the session cookie. A request carrying neither is rejected with 400.
"""

from typing import Optional

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from auth_service.adapters.api.v1.auth.dependencies import CurrentSettings, Orchestrator
from auth_service.adapters.api.v1.auth.schemas import ErrorResponse, LogoutRequest, MessageResponse
from auth_service.adapters.api.v1.auth.utils import clear_session_cookie
from auth_service.core.exceptions import MissingTokenError

router = APIRouter()


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Revoke the current session token",
    responses={
        400: {"model": ErrorResponse, "description": "No token supplied"},
        401: {"model": ErrorResponse, "description": "Invalid token"},
    },
)
async def logout(
    request: Request,
    orchestrator: Orchestrator,
    settings: CurrentSettings,
    payload: Optional[LogoutRequest] = None,
) -> JSONResponse:
    token = payload.token if payload is not None and payload.token else None
    if token is None:
        token = request.cookies.get(settings.JWT_COOKIE_NAME)
    if not token:
        raise MissingTokenError()

    await orchestrator.logout(token)

    response = JSONResponse(
        status_code=status.HTTP_200_OK,
        content=MessageResponse(message="Logout successful!").model_dump(),
    )
    clear_session_cookie(response, settings)
    return response
