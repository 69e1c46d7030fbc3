"""Main application entry point for the FastAPI application.

This module initializes the application and creates the FastAPI instance
using the application factory pattern. Serve it with
`uvicorn auth_service.main:app`.
"""

from auth_service.core.application import create_application
from auth_service.core.initialization import initialize_application

# Initialize the application
initialize_application()

# Create the FastAPI application
app = create_application()
