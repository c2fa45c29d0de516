"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from vaultflow.settings import SecretsManagerSettings, _reload_settings, get_settings


class TestSecretsManagerSettings:
    """Test SECRETSMANAGER_ environment handling."""

    def test_defaults_are_unconfigured(self):
        settings = SecretsManagerSettings()

        assert settings.region_name is None
        assert settings.max_attempts == 3
        assert not settings.is_configured

    def test_environment_prefix(self, monkeypatch):
        monkeypatch.setenv("SECRETSMANAGER_REGION_NAME", "eu-west-1")
        monkeypatch.setenv("SECRETSMANAGER_SECRET_ACCESS_KEY", "s3cr3t")

        settings = SecretsManagerSettings()

        assert settings.region_name == "eu-west-1"
        assert settings.secret_access_key.get_secret_value() == "s3cr3t"
        assert "s3cr3t" not in repr(settings)
        assert settings.is_configured

    def test_endpoint_alone_is_configured(self):
        assert SecretsManagerSettings(endpoint_url="http://localhost:4566").is_configured

    def test_disabled_is_not_configured(self):
        settings = SecretsManagerSettings(region_name="eu-west-1", use_secrets_manager=False)

        assert not settings.is_configured

    def test_max_attempts_bounds(self):
        with pytest.raises(ValidationError):
            SecretsManagerSettings(max_attempts=0)


class TestGetSettings:
    """Test the settings singleton."""

    def test_singleton(self):
        assert get_settings() is get_settings()

    def test_reload_reads_environment(self, monkeypatch):
        get_settings()
        monkeypatch.setenv("SECRETSMANAGER_REGION_NAME", "us-east-2")

        settings = _reload_settings()

        assert settings.secrets_manager.region_name == "us-east-2"
        assert get_settings() is settings
