"""Logging setup for snippetrun commands."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "snippetrun"


def configure_logging(verbose: bool = False, console: Optional[Console] = None) -> logging.Logger:
    """
    Attach a rich handler to the snippetrun logger.

    Args:
        verbose: Log at DEBUG instead of INFO
        console: Console the handler writes to (default: stderr)

    Returns:
        The configured package logger
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Replace handlers so repeated CLI invocations do not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=verbose,
        show_path=False,
        markup=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    return logger
