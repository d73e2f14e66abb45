"""
Logging Configuration
Sets up the loggers of the spring and projectile modules.
"""
import logging
import sys
from typing import Optional

LOGGER_NAMES = ("spring", "projectile", "model")


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the project loggers.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    handlers: list[logging.Handler] = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Avoid duplicate output when called more than once
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        for handler in handlers:
            logger.addHandler(handler)
        logger.propagate = False

    logging.getLogger("model").info("Logging initialized.")
