"""Unit tests for settings."""

import pytest

from qafeed.config import AuthSettings, Settings
from qafeed.util.error import ConfigurationError


class TestSettings:
    """Tests for environment-driven configuration."""

    def test_nested_env_vars(self, monkeypatch):
        monkeypatch.setenv("FEED__BATCH_SIZE", "7")
        monkeypatch.setenv("DATABASE__URL", "postgresql+asyncpg://u:p@db:5432/x")

        settings = Settings(_env_file=None)

        assert settings.feed.batch_size == 7
        assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/x"

    def test_production_requires_jwt_secret(self):
        settings = Settings(_env_file=None, environment="production")

        with pytest.raises(ConfigurationError):
            settings.ensure_production_ready()

    def test_production_with_secret_is_ready(self):
        settings = Settings(
            _env_file=None,
            environment="production",
            auth=AuthSettings(jwt_secret="s3cret"),
        )

        settings.ensure_production_ready()

    def test_development_defaults_are_fine(self):
        Settings(_env_file=None, environment="development").ensure_production_ready()
