"""Application factory for creating and configuring the FastAPI application.

This module provides a factory function to create a FastAPI application with
exception handlers and routers registered.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from auth_service.adapters.api.v1 import api_router
from auth_service.core.config.settings import Settings, get_settings
from auth_service.core.handlers import register_exception_handlers
from auth_service.core.lifecycle import create_lifespan_manager


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to run with. Defaults to the process-wide settings.

    Returns:
        FastAPI: The configured FastAPI application instance
    """
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Signup, password login, email 2FA and session token verification.",
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=create_lifespan_manager(settings),
        default_response_class=JSONResponse,
    )
    app.state.settings = settings

    register_exception_handlers(app)

    app.include_router(api_router)

    return app
