# (c) The slicefloor authors 2026
# Licensed under the MIT License (see LICENSE.txt).

"""
Logging configuration for the slicefloor package and its tools.
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = "slicefloor"


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger of the 'slicefloor' namespace.
    Calling it again replaces the previous handlers.
    :param level: logging level (e.g. logging.DEBUG, logging.INFO)
    :param log_file: optional path to save the logs to a file
    :return: the configured logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                                  datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
