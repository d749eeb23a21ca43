"""Logging setup for the gemstudio logger hierarchy."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "gemstudio"
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"


def configure_logging(level: str = "WARNING", console: Console | None = None) -> logging.Logger:
    """Attach a Rich handler to the package logger.

    Calling this more than once replaces the previous handler, so the
    CLI can reconfigure the level without duplicating output.

    Args:
        level: Level name (debug, info, warning, error). Unknown names fall back to WARNING.
        console: Console to write to (defaults to stderr)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logger.setLevel(numeric)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        log_time_format=LOG_TIMESTAMP_FORMAT,
    )
    logger.addHandler(handler)
    logger.propagate = False
    return logger
