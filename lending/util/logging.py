"""Standard library logging for third-party loggers.

Application events go through logfire; this only sets levels and format
for the libraries that log through ``logging``.
"""

import logging
import sys

from lending.config import Settings

# Libraries that are noisy at INFO
QUIET_LOGGERS = {
    "sqlalchemy.engine": logging.WARNING,
    "asyncpg": logging.WARNING,
    "uvicorn.access": logging.WARNING,
}


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the current environment.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name, quiet_level in QUIET_LOGGERS.items():
        # Debug mode echoes SQL through the engine, keep it visible there
        logging.getLogger(name).setLevel(level if settings.debug else quiet_level)

    logging.getLogger("lending").setLevel(level)
    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
