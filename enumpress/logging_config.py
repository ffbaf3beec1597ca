import logging
import os
import sys
from typing import Optional, TextIO

ROOT_LOGGER_NAME = "enumpress"
LOG_LEVEL_ENV = "ENUMPRESS_LOG_LEVEL"


def setup_logging(
    verbose: bool = False,
    log_level: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure the package logger for one command line run.

    Args:
        verbose: Trace intermediate values at DEBUG level
        log_level: Explicit level name; defaults to ENUMPRESS_LOG_LEVEL or WARNING
        stream: Destination for records; defaults to the current stderr

    Returns:
        The configured package logger
    """
    if verbose:
        log_level = "DEBUG"
    elif log_level is None:
        log_level = os.getenv(LOG_LEVEL_ENV, "WARNING")

    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Replace rather than reuse: sys.stderr may have been swapped since the last run
    for old in list(logger.handlers):
        logger.removeHandler(old)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(name)s - %(levelname)s - %(message)s"))

    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Module logger under the package namespace."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


__all__ = ["ROOT_LOGGER_NAME", "LOG_LEVEL_ENV", "setup_logging", "get_logger"]
