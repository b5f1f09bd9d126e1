from __future__ import annotations

import pytest

from config.settings import get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("KEEP_UNIDENTIFIED_NESTED", raising=False)
    settings = get_settings()
    assert settings.log_level == "INFO"
    assert settings.run_env == "test"
    assert settings.keep_unidentified_nested is False


def test_keep_unidentified_flag(monkeypatch):
    monkeypatch.setenv("KEEP_UNIDENTIFIED_NESTED", "yes")
    assert get_settings().keep_unidentified_nested is True


def test_invalid_log_level_raises(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(RuntimeError) as exc:
        get_settings()
    assert "LOG_LEVEL" in str(exc.value)
