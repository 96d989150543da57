import logging

import pytest
from pydantic import ValidationError

from mailerlite import configure_logging
from mailerlite.config.settings import DEFAULT_BASE_URL, MailerLiteSettings


@pytest.mark.unit
def test_settings_defaults():
    settings = MailerLiteSettings()
    assert settings.api_key is None
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.user_agent == "mailerlite-python"
    assert settings.timeout == 30.0
    assert settings.log_level == "WARNING"


@pytest.mark.unit
def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("MAILERLITE_API_KEY", "env-key")
    monkeypatch.setenv("MAILERLITE_TIMEOUT", "5")
    monkeypatch.setenv("mailerlite_log_level", "DEBUG")

    settings = MailerLiteSettings()
    assert settings.api_key == "env-key"
    assert settings.timeout == 5.0
    assert settings.log_level == "DEBUG"


@pytest.mark.unit
def test_settings_reject_base_url_without_trailing_slash(monkeypatch):
    monkeypatch.setenv("MAILERLITE_BASE_URL", "https://api.mailerlite.com/api/v2")
    with pytest.raises(ValidationError):
        MailerLiteSettings()


@pytest.mark.unit
def test_configure_logging_uses_settings_level(monkeypatch):
    monkeypatch.setenv("MAILERLITE_LOG_LEVEL", "ERROR")
    logger = configure_logging()
    try:
        assert logger.name == "mailerlite"
        assert logger.level == logging.ERROR
        assert configure_logging("debug").level == logging.DEBUG
    finally:
        logger.setLevel(logging.NOTSET)
