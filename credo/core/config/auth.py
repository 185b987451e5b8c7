"""Authentication settings: session tokens, password hashing, OTP and reset windows.
"""

import logging

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

JWT_SECRET_MIN_LENGTH = 32


class AuthSettings(BaseSettings):
    """Defines settings for credential hashing and session token issuance.

    The HMAC secret is loaded once at startup and never rotated at runtime.
    A missing or short secret aborts startup.

    Security Note:
        - JWT_SECRET_KEY must come from the environment or a secrets manager and
          never from version control.
        - BCRYPT_WORK_FACTOR below 10 is only acceptable in test runs.
    """

    # Session tokens
    JWT_SECRET_KEY: SecretStr = SecretStr("")
    JWT_ISSUER: str = "https://api.example.com"
    JWT_AUDIENCE: str = "credo:api:v1"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(ge=1, default=180)

    # Password policy & hashing
    PASSWORD_MIN_LENGTH: int = Field(ge=1, default=8)
    PASSWORD_MAX_LENGTH: int = Field(ge=8, default=128)
    BCRYPT_WORK_FACTOR: int = Field(ge=4, le=31, default=12)

    # One-time passcodes
    OTP_CODE_LENGTH: int = Field(ge=4, le=10, default=6)
    OTP_EXPIRE_MINUTES: int = Field(ge=1, default=5)

    # Password reset
    PASSWORD_RESET_TOKEN_EXPIRE_MINUTES: int = Field(ge=1, default=60)

    @model_validator(mode="after")
    def _validate_jwt_secret(self) -> "AuthSettings":
        """Raises ValueError if the signing secret is absent or too short.

        Returns:
            Self instance with a usable secret.
        """
        secret = self.JWT_SECRET_KEY.get_secret_value()
        if not secret:
            error_msg = "JWT_SECRET_KEY is not set. Provide it via the environment or a .env file."
            logger.error(error_msg)
            raise ValueError(error_msg)
        if len(secret) < JWT_SECRET_MIN_LENGTH:
            error_msg = f"JWT_SECRET_KEY must be at least {JWT_SECRET_MIN_LENGTH} characters long."
            logger.error(error_msg)
            raise ValueError(error_msg)

        logger.info("JWT secret validated successfully.")
        return self
