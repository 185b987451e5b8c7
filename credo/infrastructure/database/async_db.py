"""
Asynchronous database utilities built on SQLAlchemy's asyncio support.

Key Components:
    - engine: The asynchronous SQLAlchemy engine (asyncpg driver).
    - AsyncSessionFactory: A factory for creating asynchronous database sessions.
    - get_async_db: FastAPI dependency yielding one session per request.
    - check_database_health: `SELECT 1` probe used at startup and by /health.
    - create_db_and_tables: Creates missing tables, retried while the database boots.

**Security Note**: Avoid logging connection details; the URL embeds the password.
"""

from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from structlog import get_logger
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from credo.core.config.settings import settings

logger = get_logger(__name__)

engine = create_async_engine(
    settings.DATABASE_URL,
    echo=False,
    pool_size=settings.POSTGRES_POOL_SIZE,
    max_overflow=settings.POSTGRES_MAX_OVERFLOW,
    pool_timeout=settings.POSTGRES_POOL_TIMEOUT,
    pool_pre_ping=True,
)

AsyncSessionFactory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that yields an AsyncSession.

    Rolls back the transaction if the request raises and always closes the
    session.

    Yields:
        AsyncSession: An asynchronous database session.
    """
    async with AsyncSessionFactory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            logger.error("Async database session rollback due to error")
            raise


async def check_database_health() -> bool:
    """
    Performs a health check on the database connection.

    Returns:
        bool: True if the database answered `SELECT 1`, False otherwise.
    """
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.error("database_health_check_failed", error_type=type(e).__name__)
        return False
    logger.debug("database_health_check_success")
    return True


@retry(
    stop=stop_after_attempt(5),
    wait=wait_exponential(multiplier=1, min=1, max=10),
    retry=retry_if_exception_type(OperationalError),
    reraise=True,
)
async def create_db_and_tables() -> None:
    """
    Creates database tables for every registered SQLModel.
    """
    # Register table metadata before create_all
    from credo.domain.entities import Credential, OtpChallenge  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("database_tables_created", tables=list(SQLModel.metadata.tables.keys()))
