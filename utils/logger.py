import logging
import sys

from core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

def setup_logger(name: str = "expense_tracker") -> logging.Logger:
    """Configure and return the application logger."""
    level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL.upper()

    app_logger = logging.getLogger(name)
    app_logger.setLevel(level)

    # Avoid duplicate handlers when the module is re-imported (e.g. uvicorn reload)
    if not app_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        app_logger.addHandler(handler)

    return app_logger

logger = setup_logger()
