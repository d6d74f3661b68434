"""Tests for settings and startup validation."""

import pytest

from brandlens.core.config import Settings, validate_settings


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("ANALYSIS_MAX_WORKERS", raising=False)
        monkeypatch.delenv("LOG_JSON", raising=False)
        monkeypatch.delenv("LOG_ANALYSIS_DEBUG", raising=False)
        current = Settings(_env_file=None)
        assert current.log_level == "INFO"
        assert current.log_json is False
        assert current.analysis_max_workers == 1
        assert current.log_analysis_debug is False

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("ANALYSIS_MAX_WORKERS", "8")
        monkeypatch.setenv("LOG_JSON", "true")
        current = Settings(_env_file=None)
        assert current.analysis_max_workers == 8
        assert current.log_json is True


class TestValidateSettings:
    """Test startup validation."""

    def test_valid(self):
        validate_settings(Settings(_env_file=None, analysis_max_workers=2, log_level="debug"))

    def test_collects_all_errors(self):
        with pytest.raises(SystemExit) as exc:
            validate_settings(Settings(_env_file=None, analysis_max_workers=0, log_level="LOUD"))
        message = str(exc.value)
        assert "ANALYSIS_MAX_WORKERS" in message
        assert "LOG_LEVEL" in message
