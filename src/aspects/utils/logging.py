"""Logging configuration for Aspects.

Modules log through `logging.getLogger(__name__)`; this module only decides
levels and formats for the ``aspects`` logger tree.
"""

import logging
import os
import sys


def configure_logging(level=None, format_string=None):
    """Configure logging for Aspects.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string for log messages
    """
    if level is None:
        from aspects.config import current_config

        level = os.environ.get("ASPECTS_LOG_LEVEL") or current_config()["log_level"]

    numeric_level = getattr(logging, str(level).upper(), logging.INFO)

    if format_string is None:
        if numeric_level == logging.DEBUG:
            format_string = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        else:
            format_string = "%(asctime)s %(levelname)s: %(message)s"

    logging.basicConfig(
        level=numeric_level,
        format=format_string,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Replace any existing configuration
    )

    if numeric_level == logging.DEBUG:
        logging.getLogger("aspects").setLevel(logging.DEBUG)
    else:
        # Field and entity chatter stays quiet unless explicitly debugging
        logging.getLogger("aspects").setLevel(numeric_level)
        logging.getLogger("aspects.fields").setLevel(
            max(numeric_level, logging.WARNING)
        )


def get_logger(name):
    """Get a logger instance with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
