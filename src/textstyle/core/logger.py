# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Logging utilities for textstyle."""

import logging
from textstyle import __app_name__


def getLogger(name: str = __app_name__) -> logging.Logger:
    """Get a logger with the given name.

    Args:
        name: Logger name (defaults to "textstyle")

    Returns:
        logging.Logger instance
    """
    return logging.getLogger(name)


# Create the default logger instance
logger = getLogger()
