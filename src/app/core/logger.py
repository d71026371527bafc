import logging
import os
from logging.handlers import RotatingFileHandler

from .config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOGGING_LEVEL = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

_configured = False


def setup_logging() -> None:
    """Configure the root logger once: console output plus an optional rotating file."""
    global _configured
    if _configured:
        return

    root = logging.getLogger()
    root.setLevel(LOGGING_LEVEL)
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(LOGGING_LEVEL)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if settings.LOG_TO_FILE:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        file_handler = RotatingFileHandler(
            os.path.join(settings.LOG_DIR, "app.log"), maxBytes=10485760, backupCount=5
        )
        file_handler.setLevel(LOGGING_LEVEL)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    _configured = True
