"""Application initialization and setup.

This module handles the initialization tasks required before the application
starts: loading environment variables and configuring logging.
"""

from dotenv import load_dotenv

from auth_service.core.config.settings import get_settings
from auth_service.core.logging import configure_logging


def initialize_application() -> None:
    """Initialize the application with all necessary setup tasks.

    This function performs the following initialization tasks:
    1. Load environment variables
    2. Configure logging
    """
    load_dotenv(override=False)

    settings = get_settings()
    configure_logging(log_level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
