"""Log utilities for the Splunk logger's own diagnostics.

Messages emitted here describe what the library itself is doing (loading
configuration, dropping records). They never travel to the collector.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a logger that writes rich-formatted diagnostics to standard error.

    The returned logger has its handlers replaced with a single RichHandler
    bound to a stderr console, so diagnostics never mix with the
    application's standard output. Propagation to ancestor loggers is
    disabled.

    Parameters:
        name (str): Name of the logger to retrieve or create.
        level (Optional[int]): Logging level; DEBUG when not provided.

    Returns:
        logging.Logger: The configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if level is None else level)
    logger.handlers = [RichHandler(console=Console(stderr=True), show_path=False)]
    logger.propagate = False
    return logger
