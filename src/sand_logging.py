"""Logging setup for the sand logger namespace."""

import logging
import sys


def setup_logging(level=logging.INFO, log_file=None):
    """Configure the "sand" logger with a stdout handler and an optional file."""
    logger = logging.getLogger("sand")
    logger.setLevel(level)

    # Avoid duplicate output when called twice in one process
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
