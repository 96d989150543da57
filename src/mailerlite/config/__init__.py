"""Configuration for the MailerLite client."""

from .logging_config import configure_logging
from .settings import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, MailerLiteSettings

__all__ = [
    "MailerLiteSettings",
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "configure_logging",
]
