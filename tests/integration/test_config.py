#!/usr/bin/env python3
"""
Integration tests for configuration module.

Tests configuration loading and path resolution structure.
"""

from pathlib import Path

import pytest

from ynab_tracker.core.config import Config, Environment, get_config, get_state_file


@pytest.mark.integration
class TestConfigLoading:
    """Test configuration loading and structure."""

    def test_config_loads_successfully(self):
        """Test that config loads without errors."""
        config = get_config()

        assert config is not None
        assert isinstance(config.data_dir, Path)
        assert config.data_dir.is_absolute()

    def test_from_environment_reads_variables(self, monkeypatch, temp_dir):
        """Test environment variables populate every section."""
        monkeypatch.setenv("TRACKER_DATA_DIR", str(temp_dir))
        monkeypatch.setenv("YNAB_TIMEOUT", "12")
        monkeypatch.setenv("QUOTES_BASE_URL", "https://quotes.example.test")

        config = Config.from_environment()

        assert config.environment == Environment.TEST
        assert config.data_dir == temp_dir
        assert config.tracker.state_file == temp_dir / "tracker" / "state.json"
        assert config.ynab.api_token == "test-token"
        assert config.ynab.timeout == 12
        assert config.quotes.base_url == "https://quotes.example.test"
        assert config.validate() == []

    def test_state_file_override(self, monkeypatch, temp_dir):
        """Test TRACKER_STATE_FILE replaces the default location."""
        monkeypatch.setenv("TRACKER_STATE_FILE", str(temp_dir / "custom.json"))

        assert Config.from_environment().tracker.state_file == temp_dir / "custom.json"

    def test_get_state_file_follows_environment(self, monkeypatch, temp_dir):
        """Test the default state file is read from the reloaded configuration."""
        monkeypatch.setenv("TRACKER_STATE_FILE", str(temp_dir / "env-state.json"))
        monkeypatch.setattr("ynab_tracker.core.config._config", None)

        assert get_state_file() == temp_dir / "env-state.json"

    def test_production_requires_token(self, monkeypatch, temp_dir):
        """Test a missing token is a validation error in production."""
        monkeypatch.setenv("TRACKER_ENV", "production")
        monkeypatch.setenv("TRACKER_DATA_DIR", str(temp_dir))
        monkeypatch.delenv("YNAB_API_TOKEN")

        errors = Config.from_environment().validate()

        assert "YNAB_API_TOKEN is required in production" in errors

    def test_non_positive_timeouts_are_invalid(self, monkeypatch):
        """Test timeouts must be positive."""
        monkeypatch.setenv("QUOTES_TIMEOUT", "0")

        assert "Quotes timeout must be positive" in Config.from_environment().validate()

    def test_to_dict_redacts_token(self):
        """Test the token is hidden unless explicitly requested."""
        config = Config.from_environment()

        assert config.to_dict()["ynab"]["api_token"] == "***REDACTED***"
        assert config.to_dict(include_sensitive=True)["ynab"]["api_token"] == "test-token"
        assert config.to_dict()["environment"] == "test"
