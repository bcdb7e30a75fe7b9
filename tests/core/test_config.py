"""Tests for interpreter settings."""

import pytest

from calc.core.config import Settings, get_settings


class TestSettingsDefaults:
    """Test default values."""

    def test_defaults(self, settings):
        """Test the documented defaults."""
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_FORMAT == "text"
        assert settings.LOG_FILE is None
        assert settings.REQUIRE_EOF is True
        assert settings.ALLOW_STATEMENT_TOKENS is True
        assert settings.MAX_SOURCE_LENGTH == 100_000


class TestSettingsEnvironment:
    """Test environment overrides."""

    def test_env_prefix(self, monkeypatch):
        """Test CALC_-prefixed variables override defaults."""
        monkeypatch.setenv("CALC_REQUIRE_EOF", "false")
        monkeypatch.setenv("CALC_MAX_SOURCE_LENGTH", "64")
        monkeypatch.setenv("CALC_LOG_FORMAT", "json")

        settings = Settings(_env_file=None)

        assert settings.REQUIRE_EOF is False
        assert settings.MAX_SOURCE_LENGTH == 64
        assert settings.LOG_FORMAT == "json"

    def test_unprefixed_variables_ignored(self, monkeypatch):
        """Test variables without the prefix have no effect."""
        monkeypatch.setenv("REQUIRE_EOF", "false")
        assert Settings(_env_file=None).REQUIRE_EOF is True

    def test_env_file(self, tmp_path):
        """Test values are read from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("CALC_LOG_LEVEL=DEBUG\nCALC_ALLOW_STATEMENT_TOKENS=0\n")

        settings = Settings(_env_file=env_file)

        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.ALLOW_STATEMENT_TOKENS is False

    def test_invalid_value_rejected(self, monkeypatch):
        """Test non-integer lengths fail validation."""
        monkeypatch.setenv("CALC_MAX_SOURCE_LENGTH", "lots")
        with pytest.raises(ValueError):
            Settings(_env_file=None)


class TestGetSettings:
    """Test the cached accessor."""

    def test_cached(self):
        """Test get_settings returns the same instance."""
        assert get_settings() is get_settings()
