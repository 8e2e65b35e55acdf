"""Logging setup for the planar package."""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from planar.shared.config.settings import LoggingSettings

ROOT_LOGGER = "planar"


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the ``planar`` hierarchy."""
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(settings: LoggingSettings) -> logging.Logger:
    """Configure the ``planar`` logger from settings.

    Existing handlers on the package logger are replaced, so calling this
    more than once does not duplicate output.

    Args:
        settings: Logging settings

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(settings.level.upper())

    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()

    if settings.console_colored:
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(settings.format))

    logger.addHandler(handler)
    logger.propagate = False
    return logger
