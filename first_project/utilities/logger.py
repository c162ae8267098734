"""
Logger module for first_project.

This module provides a centralized logger that can be imported throughout the package
without causing circular import issues. User facing output is printed; this logger carries diagnostics.
"""

import logging
import sys

# Module-level logger
logger: logging.Logger = logging.getLogger('first_project')
logger.setLevel(logging.WARNING)  # Default to WARNING level to keep the walkthrough output readable

LOG_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

class StderrHandler(logging.StreamHandler):
    """ Writes to whatever sys.stderr is when a record is emitted, so redirected or replaced streams are honoured. """

    def __init__(self) -> None:
        super().__init__()
        self.setFormatter(logging.Formatter(LOG_FORMAT))

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass

def set_logger(custom_logger: logging.Logger) -> None:
    """Allow users to provide their own logger."""
    global logger
    logger = custom_logger

def set_log_level(level: int | str) -> None:
    """Set the logging level for the module.

    Args:
        level: logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, or logging.CRITICAL,
            or the name of one of those levels.
    """
    if isinstance(level, str):
        from .setup_error import SetupError
        level_name = level.upper()
        if level_name not in LOG_LEVELS:
            raise SetupError(f"Unknown log level '{level}'. Expected one of: {', '.join(LOG_LEVELS)}.")
        level = LOG_LEVELS[level_name]
    logger.setLevel(level)

def configure_logging(level: int | str) -> None:
    """Attach a stderr handler to the module logger and set its level. Used by the console entry point.
    Calling this more than once does not add a second handler."""
    if not any(isinstance(handler, StderrHandler) for handler in logger.handlers):
        logger.addHandler(StderrHandler())
    set_log_level(level)
