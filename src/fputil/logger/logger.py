"""Global logger configuration for the fputil package."""

import logging
import sys

from pydantic import ValidationError

from fputil.core.config import Settings

__all__ = ["logger", "setup_logger"]


def setup_logger(
    name: str = "fputil",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (typically the package name)
        level: Log level name known to ``logging`` (DEBUG, INFO, WARN, ...).
            Read from the environment when omitted; an unrecognised
            environment value falls back to INFO.
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    try:
        settings = Settings.load(level=level)
    except ValidationError:
        if level is not None:
            raise
        # Unrecognised level in the environment
        settings = Settings()
    format_string = format_string or settings.LOG_FORMAT

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(settings.level_number)
        logger.propagate = False

    return logger


# Create default logger instance for the package
logger = setup_logger()
