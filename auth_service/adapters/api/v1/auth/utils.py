"""Cookie helpers for the session token."""

from fastapi import Response

from auth_service.core.config.settings import Settings
from auth_service.domain.value_objects import Token


def set_session_cookie(response: Response, token: Token, settings: Settings) -> None:
    """Attaches the session token as an HttpOnly cookie scoped to `/`."""
    response.set_cookie(
        key=settings.JWT_COOKIE_NAME,
        value=token.expose_secret(),
        max_age=settings.TOKEN_TTL_HOURS * 3600,
        path="/",
        httponly=True,
        secure=settings.APP_ENV == "production",
        samesite="lax",
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(key=settings.JWT_COOKIE_NAME, path="/")
