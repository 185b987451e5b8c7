"""
Process-level settings: identity, environment, logging, CORS and languages.
"""
from typing import List, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """
    Settings shared by every part of the service.

    Security Note:
        - ALLOWED_ORIGINS must list trusted front-ends only; browsers send the
          bearer token along with credentialed CORS requests.
    """
    PROJECT_NAME: str = "credo"
    VERSION: str = "0.1.0"
    APP_ENV: str = "development"
    DEBUG: bool = False

    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    ALLOWED_ORIGINS: Union[str, List[str]] = Field(default="http://localhost:3000")
    DEFAULT_LANGUAGE: str = "en"
    SUPPORTED_LANGUAGES: List[str] = ["en", "es"]

    # Delivery collaborator logs raw codes and tokens when enabled
    NOTIFICATION_TEST_MODE: bool = False

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def split_origins(cls, value: Union[str, List[str]]) -> List[str]:
        """Accepts ``"https://a,https://b"`` from the environment as well as a list."""
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value
