"""
Logging Configuration
Attaches console (and optionally file) output to the 'montecarlopi' logger.
Library modules only create child loggers; `main()` is the one caller.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route the simulation's log records to stdout and, if given, a file.

    Args:
        level: Threshold for the package logger and its handlers.
        log_file: Optional path; the file is overwritten on each call.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("montecarlopi")
    logger.setLevel(level)

    # Repeated calls replace the handlers of an earlier run
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("Logging initialized.")
    return logger
