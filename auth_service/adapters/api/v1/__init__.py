"""API v1 router configuration.

The authentication routes are mounted at the root (`/signup`, `/login`, ...)
so existing clients keep working.
"""

from fastapi import APIRouter

from .auth import router as auth_router
from .health import router as health_router

api_router = APIRouter()

api_router.include_router(health_router, prefix="/health", tags=["health"])
api_router.include_router(auth_router, tags=["auth"])
