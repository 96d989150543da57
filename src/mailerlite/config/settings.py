"""Configuration settings for the MailerLite client.

This module defines the settings a ``Client`` falls back to when an
option is not passed explicitly. Settings are loaded from environment
variables prefixed with ``MAILERLITE_`` and from ``.env`` files.
"""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.mailerlite.com/api/v2/"
DEFAULT_USER_AGENT = "mailerlite-python"


class MailerLiteSettings(BaseSettings):
    """Client settings loaded from environment variables.

    :param api_key: API key sent in the ``X-MailerLite-ApiKey`` header
    :type api_key: Optional[str]
    :param base_url: Base URL for API requests, with a trailing slash
    :type base_url: str
    :param user_agent: User agent sent with every request
    :type user_agent: str
    :param timeout: Read timeout in seconds for the default transport
    :type timeout: float
    :param log_level: Logging level applied by ``configure_logging``
    :type log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    """

    model_config = SettingsConfigDict(
        env_prefix="MAILERLITE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra fields in .env file
    )

    api_key: Optional[str] = Field(None, description="MailerLite API key")
    base_url: str = Field(DEFAULT_BASE_URL, description="MailerLite API Base URL")
    user_agent: str = Field(DEFAULT_USER_AGENT, description="User agent header")
    timeout: float = Field(30.0, description="Read timeout in seconds")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "WARNING", description="Logging level"
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require a trailing slash on the base URL.

        Relative paths are resolved against the base URL, and without the
        slash the last path segment (``v2``) would be silently dropped.

        :param v: The configured base URL
        :type v: str
        :return: The unchanged base URL
        :rtype: str
        :raises ValueError: If the URL does not end with a slash
        """
        if not v.endswith("/"):
            raise ValueError(f"base URL must have a trailing slash, but {v!r} does not")
        return v
