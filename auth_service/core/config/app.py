"""
Application-specific settings.
"""
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """
    Defines application-wide settings like project name, environment and
    logging output.

    Performance Note:
        - API_WORKERS should be tuned based on server capacity. Password
          hashing already runs on its own thread pool inside each worker.
    """
    PROJECT_NAME: str = "auth-service"
    VERSION: str = "0.1.0"
    APP_ENV: Literal["development", "test", "staging", "production"] = "development"
    DEBUG: bool = False

    API_HOST: str = "0.0.0.0"
    API_PORT: int = Field(ge=1, le=65535, default=3000)
    API_WORKERS: int = Field(ge=1, default=1)
    RELOAD: bool = False

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    # "memory" wires the in-process stores, "persistent" wires Postgres + Redis.
    STORE_BACKEND: Literal["memory", "persistent"] = "memory"
