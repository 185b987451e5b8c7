"""
Database connection settings.
"""
import logging

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class DatabaseSettings(BaseSettings):
    """
    Defines settings for connecting to the PostgreSQL database.

    Security Note:
        - POSTGRES_PASSWORD must be securely stored and never logged or exposed
          in version control.
    Performance Note:
        - Tune POSTGRES_POOL_SIZE and POSTGRES_MAX_OVERFLOW based on application
          load and database server capacity.
    """
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: SecretStr = SecretStr("")
    POSTGRES_DB: str = "credo"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = Field(ge=1, le=65535, default=5432)
    POSTGRES_POOL_SIZE: int = Field(ge=1, default=10)
    POSTGRES_MAX_OVERFLOW: int = Field(ge=0, default=20)
    POSTGRES_POOL_TIMEOUT: float = Field(ge=1.0, default=5.0)
    DATABASE_URL: str = ""

    @model_validator(mode="after")
    def assemble_db_url(self) -> "DatabaseSettings":
        """
        Assembles the asyncpg connection URL if not provided explicitly.

        Returns:
            Self instance with DATABASE_URL populated.
        """
        if self.DATABASE_URL:
            return self

        password = self.POSTGRES_PASSWORD.get_secret_value()
        if not password:
            logger.warning("POSTGRES_PASSWORD not set during DATABASE_URL assembly.")

        self.DATABASE_URL = (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:"
            f"{password}@{self.POSTGRES_HOST}:"
            f"{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )
        logger.debug("Assembled DATABASE_URL (password masked for security).")
        return self
