"""Application initialization and setup.

Runs before the FastAPI instance is created: environment loading, logging
configuration and i18n catalogs.
"""

from dotenv import load_dotenv

from credo.core.config.settings import settings
from credo.core.logging import configure_logging
from credo.utils.i18n import setup_i18n


def initialize_application() -> None:
    """Initialize the application with all necessary setup tasks.

    1. Load environment variables
    2. Configure logging
    3. Setup internationalization (i18n)
    """
    load_dotenv()

    configure_logging(log_level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

    setup_i18n()
