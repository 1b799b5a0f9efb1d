"""Tests for settings loading."""

from pathlib import Path

from entity_attributes.config import DEFAULT_NAMESPACE, Settings, get_settings


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self):
        """Test default settings values."""
        settings = Settings()

        assert settings.namespace == DEFAULT_NAMESPACE
        assert settings.catalog_path is None
        assert settings.random_seed is None
        assert settings.log_level == "INFO"
        assert settings.log_format == "console"

    def test_environment_overrides(self, monkeypatch):
        """Test that prefixed environment variables override defaults."""
        monkeypatch.setenv("ENTITY_ATTRIBUTES_NAMESPACE", "mymod")
        monkeypatch.setenv("ENTITY_ATTRIBUTES_CATALOG_PATH", "extra.yaml")
        monkeypatch.setenv("ENTITY_ATTRIBUTES_RANDOM_SEED", "42")

        settings = Settings()

        assert settings.namespace == "mymod"
        assert settings.catalog_path == Path("extra.yaml")
        assert settings.random_seed == 42

    def test_get_settings_cached(self):
        """Test that get_settings returns the same instance."""
        assert get_settings() is get_settings()
