import pytest
from pydantic import ValidationError

from lifecycle_transition.config import Settings


def test_defaults():
    settings = Settings()
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"
    assert settings.max_document_bytes == 64 * 1024


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("TRANSITION_LOG_LEVEL", "debug")
    monkeypatch.setenv("TRANSITION_LOG_FORMAT", "Console")
    monkeypatch.setenv("TRANSITION_MAX_DOCUMENT_BYTES", "1024")
    settings = Settings()
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "console"
    assert settings.max_document_bytes == 1024


def test_rejects_unknown_log_format(monkeypatch):
    monkeypatch.setenv("TRANSITION_LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        Settings()
