"""
Logging Configuration
Sets up the loggers for the simulations and the box_search library.
"""
import logging
import sys
from typing import Optional

LOGGER_NAMES = ("simulations", "box_search")


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the 'simulations' and 'box_search' logger namespaces.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    handlers = []

    # 1. Console Handler (stderr, stdout carries the reports)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    # 2. File Handler (Optional)
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Avoid duplicate logs when called more than once
        if logger.hasHandlers():
            logger.handlers.clear()

        for handler in handlers:
            logger.addHandler(handler)

    logging.getLogger("simulations").info("Logging initialized.")
