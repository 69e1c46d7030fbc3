"""FastAPI dependencies for the authentication routes.

The container is built by the lifespan and stored on `app.state`; these
helpers hand its pieces to the routes.
"""

from typing import Annotated

from fastapi import Depends, Request

from auth_service.core.config.settings import Settings
from auth_service.domain.services.authentication import AuthenticationOrchestrator


def get_orchestrator(request: Request) -> AuthenticationOrchestrator:
    return request.app.state.container.orchestrator


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


Orchestrator = Annotated[AuthenticationOrchestrator, Depends(get_orchestrator)]
CurrentSettings = Annotated[Settings, Depends(get_app_settings)]
