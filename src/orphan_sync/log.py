import os
import sys
from typing import Optional

from loguru import logger

from orphan_sync.errors import ConfigurationError

COMPLETE_LEVEL = "COMPLETE"
LOG_LEVEL_ENV = "ORPHANS_LOG_LEVEL"


def register_complete_level():
    """Add the COMPLETE level (between SUCCESS and WARNING) used for run summaries."""
    try:
        logger.level(COMPLETE_LEVEL)
    except ValueError:
        logger.level(COMPLETE_LEVEL, no=27, color="<green><bold>", icon="☑")


def configure_logging(level: Optional[str] = None):
    """Replace loguru's default handler with a stderr sink at the requested level."""
    log_level = (level or os.environ.get(LOG_LEVEL_ENV, "INFO")).upper()

    logger.remove()
    try:
        logger.add(
            sys.stderr,
            level=log_level,
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        )
    except ValueError as e:
        raise ConfigurationError(f"Unknown log level: {log_level}") from e
    return log_level


register_complete_level()
