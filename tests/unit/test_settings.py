"""Unit tests for JsonRespSettings."""

import pytest

from jsonresp.config.settings import JsonRespSettings, get_settings


class TestJsonRespSettings:
    def test_defaults_are_correct(self, monkeypatch: pytest.MonkeyPatch):
        for key in (
            "JSONRESP_LOG_LEVEL",
            "JSONRESP_TRAILING_NEWLINE",
            "JSONRESP_INTERNAL_ERROR_MESSAGE",
        ):
            monkeypatch.delenv(key, raising=False)

        settings = JsonRespSettings()

        assert settings.log_level == "INFO"
        assert settings.trailing_newline is True
        assert settings.internal_error_message == "Internal server error"

    def test_reads_prefixed_env_vars(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("JSONRESP_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("JSONRESP_TRAILING_NEWLINE", "0")

        settings = JsonRespSettings()

        assert settings.log_level == "DEBUG"
        assert settings.trailing_newline is False

    def test_unprefixed_env_vars_are_ignored(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("JSONRESP_LOG_LEVEL", raising=False)
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        assert JsonRespSettings().log_level == "INFO"


class TestGetSettings:
    def test_is_cached(self, fresh_settings):
        assert get_settings() is get_settings()

    def test_cache_clear_picks_up_env(self, monkeypatch: pytest.MonkeyPatch, fresh_settings):
        monkeypatch.setenv("JSONRESP_LOG_LEVEL", "WARNING")
        assert get_settings().log_level == "WARNING"
