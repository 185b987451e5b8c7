"""Middleware configuration for the FastAPI application.

Registers CORS and the request-language middleware.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from credo.core.config.settings import settings
from credo.utils.i18n import get_request_language


def configure_middleware(app: FastAPI) -> None:
    """Configure all middleware for the FastAPI application.

    Args:
        app (FastAPI): The FastAPI application instance
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.middleware("http")(set_language_middleware)


async def set_language_middleware(request: Request, call_next):
    """Resolve the caller's language once and echo it as Content-Language.

    Args:
        request (Request): The incoming request
        call_next: The next middleware or route handler

    Returns:
        Response: The response with language headers
    """
    lang = get_request_language(request)
    request.state.language = lang
    response = await call_next(request)
    response.headers["Content-Language"] = lang
    return response
