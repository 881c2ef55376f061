"""
Logging for the trigcircle package.

Everything logs through `logging.getLogger(__name__)`; this module only wires
handlers onto the package logger once, at startup.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "trigcircle"

CONSOLE_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)-7s %(name)s [%(funcName)s] %(message)s"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach a console handler (and optionally a file handler) to the package
    logger. Calling it again replaces the previous handlers.

    Args:
        level: Threshold for the package logger and its handlers.
        log_file: Path of a log file, overwritten on each run.

    Returns:
        The configured package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    handlers[0].setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(level)
        package_logger.addHandler(handler)

    package_logger.debug("Logging configured at level %s.", logging.getLevelName(level))
    return package_logger
