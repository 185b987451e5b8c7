"""Application factory for creating and configuring the FastAPI application.
"""

from fastapi import FastAPI

from credo.adapters.api.v1 import api_router
from credo.core.config.settings import settings
from credo.core.handlers import register_exception_handlers
from credo.core.lifecycle import create_lifespan_manager
from credo.core.middleware import configure_middleware


def create_application() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Credential and session authentication service.",
        lifespan=create_lifespan_manager(),
    )

    configure_middleware(app)

    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api/v1")

    return app
