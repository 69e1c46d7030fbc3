"""Authentication router package: signup, login, 2FA, logout and token verification."""

from fastapi import APIRouter

from .routes import login as login_route
from .routes import logout as logout_route
from .routes import signup as signup_route
from .routes import verify_2fa as verify_2fa_route
from .routes import verify_token as verify_token_route

router = APIRouter(tags=["auth"])

# Delegate to sub-routers ----------------------------------------------------

router.include_router(signup_route.router, prefix="/signup")
router.include_router(login_route.router, prefix="/login")
router.include_router(verify_2fa_route.router, prefix="/verify-2fa")
router.include_router(logout_route.router, prefix="/logout")
router.include_router(verify_token_route.router, prefix="/verify-token")

__all__ = ["router"]
