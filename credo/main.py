"""Main application entry point for the FastAPI application.

Run with ``uvicorn credo.main:app``.
"""

from credo.core.application import create_application
from credo.core.initialization import initialize_application

# Initialize the application
initialize_application()

# Create the FastAPI application
app = create_application()
