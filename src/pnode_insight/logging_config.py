"""
Logging configuration for pNode Insight.

Handlers are attached to the ``pnode_insight`` logger itself rather than
the root logger, so calling ``setup_logging`` again (each CLI command does)
replaces the previous setup instead of stacking handlers.

The optional log file always records at INFO or finer: a long ``watch``
session keeps its per-tick history on disk while the terminal shows only
warnings.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "pnode_insight"

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _console_level(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure the pnode_insight logger.

    Args:
        verbose: Show DEBUG records on the terminal
        quiet: Show only ERROR records on the terminal (wins over verbose)
        log_file: Append records to this file, at INFO level or finer

    Returns:
        The configured pnode_insight logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_level = _console_level(verbose, quiet)
    console_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=True,
        show_path=verbose,
    )
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    level = console_level
    if log_file:
        file_level = min(console_level, logging.INFO)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)
        level = file_level

    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name (e.g., 'pnode_insight.snapshot')
              If None, returns the root pnode_insight logger

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)

    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"

    return logging.getLogger(name)
