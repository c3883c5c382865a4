"""
Logging configuration for Complexity Insight.

The library only creates loggers under the ``complexity_insight`` namespace;
applications opt in to output with setup_logging(), which renders records
through rich on stderr.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "complexity_insight"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """Route complexity_insight records to stderr, and optionally a file.

    ``verbose`` shows the DEBUG traces of each walk and finalization pass,
    ``quiet`` keeps only errors; otherwise WARNING (unbalanced scope exits)
    and above are shown. Calling it again replaces the previous handlers.
    """
    level = logging.ERROR if quiet else logging.DEBUG if verbose else logging.WARNING

    logger = logging.getLogger(ROOT_LOGGER)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    logger.addHandler(RichHandler(console=Console(stderr=True), markup=False))
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for a module, prefixed with ``complexity_insight`` when needed."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
