"""Signup endpoint.

Thin controller: the request body is handed to the orchestrator as raw
strings and domain errors are translated by the global exception handlers.
"""

from fastapi import APIRouter, status

from auth_service.adapters.api.v1.auth.dependencies import Orchestrator
from auth_service.adapters.api.v1.auth.schemas import ErrorResponse, MessageResponse, SignupRequest

router = APIRouter()


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an account",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid email or password"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
        422: {"description": "Malformed request body"},
    },
)
async def signup(payload: SignupRequest, orchestrator: Orchestrator) -> MessageResponse:
    """Registers a new account.

    Args:
        payload: Email, password and whether the account uses 2FA.
        orchestrator: Authentication facade.

    Returns:
        MessageResponse: Confirmation message.
    """
    await orchestrator.signup(payload.email, payload.password, payload.requires_2fa)
    return MessageResponse(message="User created successfully!")
