import logging

import pytest
from pydantic import ValidationError

from incometax.config import Settings, get_settings


def test_settings_defaults(monkeypatch):
    for name in ("INCOMETAX_LOG_LEVEL", "INCOMETAX_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.log_level == "WARNING"
    assert settings.log_file is None
    assert settings.log_level_number() == logging.WARNING


def test_log_level_parsing(monkeypatch):
    monkeypatch.setenv("INCOMETAX_LOG_LEVEL", "debug")
    monkeypatch.setenv("INCOMETAX_LOG_FILE", "  ")
    get_settings.cache_clear()
    settings = get_settings()
    assert settings.log_level == "DEBUG"
    assert settings.log_file is None
    get_settings.cache_clear()


def test_rejects_unknown_log_level(monkeypatch):
    monkeypatch.setenv("INCOMETAX_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        Settings()


def test_settings_ignore_assessment_year_env(monkeypatch):
    monkeypatch.setenv("INCOMETAX_ASSESSMENT_YEAR", "2024-25")
    settings = Settings()
    assert not hasattr(settings, "assessment_year")
