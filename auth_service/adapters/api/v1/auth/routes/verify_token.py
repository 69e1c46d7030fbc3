"""Token verification endpoint used by other services to check a session."""

from fastapi import APIRouter, status

from auth_service.adapters.api.v1.auth.dependencies import Orchestrator
from auth_service.adapters.api.v1.auth.schemas import (
    ErrorResponse,
    VerifyTokenRequest,
    VerifyTokenResponse,
)

router = APIRouter()


@router.post(
    "",
    response_model=VerifyTokenResponse,
    status_code=status.HTTP_200_OK,
    summary="Check that a session token is valid and not revoked",
    responses={
        401: {"model": ErrorResponse, "description": "Invalid token"},
        422: {"description": "Malformed request body"},
    },
)
async def verify_token(
    payload: VerifyTokenRequest, orchestrator: Orchestrator
) -> VerifyTokenResponse:
    claims = await orchestrator.verify_token(payload.token)
    return VerifyTokenResponse(message="Token is valid!", email=claims.subject.value)
