"""Tests for config module."""

import pytest

from parley.config import Settings


@pytest.mark.unit
class TestSettings:
    """Test Settings class."""

    def test_defaults(self):
        """Colors are off and errors go to stderr by default."""
        settings = Settings()

        assert settings.ansi_enabled is False
        assert settings.stderr is True

    def test_from_env_defaults(self, temp_dir):
        """Missing variables and .env fall back to defaults."""
        settings = Settings.from_env(temp_dir)

        assert settings == Settings()

    def test_from_env_variables(self, temp_dir, monkeypatch):
        """Test loading settings from environment variables."""
        monkeypatch.setenv("PARLEY_COLORS", "TRUE")
        monkeypatch.setenv("PARLEY_STDERR", "false")

        settings = Settings.from_env(temp_dir)

        assert settings.ansi_enabled is True
        assert settings.stderr is False

    def test_from_dotenv_file(self, temp_dir):
        """Test loading settings from a .env file."""
        (temp_dir / ".env").write_text("PARLEY_COLORS=true\nPARLEY_STDERR=false\n")

        settings = Settings.from_env(temp_dir)

        assert settings.ansi_enabled is True
        assert settings.stderr is False

    def test_environment_wins_over_dotenv(self, temp_dir, monkeypatch):
        """Variables already set are not overridden by .env."""
        (temp_dir / ".env").write_text("PARLEY_COLORS=true\n")
        monkeypatch.setenv("PARLEY_COLORS", "false")

        settings = Settings.from_env(temp_dir)

        assert settings.ansi_enabled is False

    def test_defaults_to_current_directory(self, temp_dir, monkeypatch):
        """Test that .env is looked up in the working directory."""
        monkeypatch.chdir(temp_dir)
        (temp_dir / ".env").write_text("PARLEY_STDERR=false\n")

        settings = Settings.from_env()

        assert settings.stderr is False
