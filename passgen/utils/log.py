"""
Logging setup for the passgen command line.

Log records go to stderr so they never mix with generated passwords
on stdout.
"""

import logging
import sys
from typing import Dict, Optional, TextIO

from ..exceptions import ConfigurationError

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_LEVEL = "error"

LOG_LEVELS: Dict[str, int] = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

ROOT_LOGGER = "passgen"


def parse_log_level(name: str) -> int:
    """
    Convert a level name to a logging level.

    Args:
        name: One of trace, debug, info, warn, warning, error (any case)

    Returns:
        Numeric logging level

    Raises:
        ConfigurationError: If the name is not a known level
    """
    try:
        return LOG_LEVELS[name.strip().lower()]
    except (KeyError, AttributeError):
        raise ConfigurationError(f"Invalid log level: {name}") from None


def configure_logging(level: int, stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a single stderr handler to the passgen logger."""
    logger = logging.getLogger(ROOT_LOGGER)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    return logger
