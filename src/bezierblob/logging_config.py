"""
Logging Configuration
Sets up the package logger for the blob application.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "bezierblob"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def parse_level(name: str) -> int:
    """
    Translate a level name from the command line ("debug", "INFO", ...)
    into a `logging` level number.

    Raises:
        ValueError: If the name is not a standard level.
    """
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level '{name}'")
    return level


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger of the 'bezierblob' namespace.

    Every module logs through `logging.getLogger(__name__)`, so the
    handlers attached here see the model and the view alike.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # main() may run twice in one interpreter (tests, REPL)
    if logger.hasHandlers():
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized (level=%s).", logging.getLevelName(level))
    return logger
