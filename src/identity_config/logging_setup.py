"""Logging configuration for the identity store packages."""

import logging
import sys
from functools import lru_cache

from identity_config.settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@lru_cache(maxsize=1)
def configure_logging() -> None:
    """Configure console logging.

    Sets up logging with:
    - Console output with timestamps and module names
    - Configurable log level for identity_store modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("identity_store").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)
