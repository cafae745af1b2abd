"""Logging setup shared by the sge_acct CLI and library code."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from .config import SgeAcctConfig

PACKAGE_LOGGER = "sge_acct"


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the sge_acct hierarchy."""
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a RichHandler writing to stderr to the package logger.

    Args:
        verbose: Log at DEBUG instead of SgeAcctConfig.LOG_LEVEL

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, SgeAcctConfig.LOG_LEVEL, None)
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)

    # Re-running the CLI in one process (tests) must not stack handlers
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setLevel(level)
    logger.addHandler(handler)
    return logger
