# viralcarrot/core/logging.py
# Root logger setup, called once when the app module loads

import logging

from viralcarrot.core.config import settings

NOISY_LOGGERS = ("httpx", "httpcore", "pymongo", "motor")


def setup_logging(level: str | None = None) -> None:
    """Apply LOG_LEVEL and a single format to the root logger."""
    name = (level or settings.LOG_LEVEL or "INFO").upper()
    numeric_level = getattr(logging, name, logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        force=True,
    )

    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)
