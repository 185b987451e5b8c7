"""Application lifecycle management.

Startup refuses to serve traffic without a reachable database; tables are
created if missing.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from credo.core.config.settings import settings
from credo.core.logging import logger
from credo.infrastructure.database.async_db import (
    check_database_health,
    create_db_and_tables,
    engine,
)


def create_lifespan_manager():
    """Create the application lifespan manager.

    Returns:
        AsyncContextManager: The lifespan manager for the FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Handles startup and shutdown events.

        Raises:
            RuntimeError: If the database is unavailable during startup
        """
        if not await check_database_health():
            logger.error("database_unavailable_on_startup")
            raise RuntimeError("Database unavailable")
        await create_db_and_tables()
        logger.info("application_startup", env=settings.APP_ENV, version=settings.VERSION)

        yield

        await engine.dispose()
        logger.info("application_shutdown", env=settings.APP_ENV)

    return lifespan
