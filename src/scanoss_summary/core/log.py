# log.py
# SPDX-License-Identifier: MIT
"""Package logger for scanoss_summary.

Modules log through ``get_logger(__name__)``. A NullHandler keeps the package
silent until the host application (or :meth:`LoggingConfig.apply`) attaches
a handler.
"""

from __future__ import annotations

import logging

__all__ = ["PACKAGE_LOGGER_NAME", "get_logger"]

PACKAGE_LOGGER_NAME = "scanoss_summary"

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a named logger, defaulting to the package logger."""
    return logging.getLogger(name or PACKAGE_LOGGER_NAME)
