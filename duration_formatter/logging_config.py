from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from rich.logging import RichHandler

load_dotenv()

LOGGER_NAME = "duration_formatter"

logger = logging.getLogger(LOGGER_NAME)


def configure_logging(level: str | None = None) -> None:
    """Attach the rich handler once and apply ``level`` or ``LOG_LEVEL``."""
    level = (level or os.getenv("LOG_LEVEL", "WARNING")).upper()
    if not logger.handlers:
        handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, level, logging.WARNING))


configure_logging()
