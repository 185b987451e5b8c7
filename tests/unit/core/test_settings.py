import pytest
from pydantic import ValidationError

from credo.core.config.settings import Settings

SECRET = "s" * 32


def test_short_signing_secret_aborts_startup():
    with pytest.raises(ValidationError, match="at least 32 characters"):
        Settings(_env_file=None, JWT_SECRET_KEY="too-short")


def test_missing_signing_secret_aborts_startup():
    with pytest.raises(ValidationError, match="JWT_SECRET_KEY is not set"):
        Settings(_env_file=None, JWT_SECRET_KEY="")


def test_database_url_is_assembled_from_parts():
    settings = Settings(
        _env_file=None,
        JWT_SECRET_KEY=SECRET,
        DATABASE_URL="",
        POSTGRES_USER="credo",
        POSTGRES_PASSWORD="pw",
        POSTGRES_HOST="db",
        POSTGRES_PORT=6543,
        POSTGRES_DB="auth",
    )

    assert settings.DATABASE_URL == "postgresql+asyncpg://credo:pw@db:6543/auth"


def test_explicit_database_url_wins():
    url = "postgresql+asyncpg://u:p@elsewhere:5432/x"

    assert Settings(_env_file=None, JWT_SECRET_KEY=SECRET, DATABASE_URL=url).DATABASE_URL == url


def test_defaults_for_session_and_challenge_windows():
    settings = Settings(_env_file=None, JWT_SECRET_KEY=SECRET)

    assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 180
    assert settings.OTP_CODE_LENGTH == 6
    assert settings.OTP_EXPIRE_MINUTES == 5
    assert settings.PASSWORD_RESET_TOKEN_EXPIRE_MINUTES == 60


def test_test_environment_enables_notification_test_mode():
    assert Settings(_env_file=None, JWT_SECRET_KEY=SECRET, APP_ENV="test").NOTIFICATION_TEST_MODE is True
