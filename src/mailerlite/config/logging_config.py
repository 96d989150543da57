"""Logging setup for applications using the MailerLite client.

The library itself only emits records through module loggers under the
``mailerlite`` namespace and never installs handlers.
"""

import logging
from typing import Optional

from .settings import MailerLiteSettings

PACKAGE_LOGGER = "mailerlite"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Set the level of the package logger.

    :param level: Level name; defaults to ``MAILERLITE_LOG_LEVEL``
    :type level: Optional[str]
    :return: The package logger
    :rtype: logging.Logger
    """
    if level is None:
        level = MailerLiteSettings().log_level
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper())
    return logger
