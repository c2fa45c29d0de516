"""Tests for secret store and provider factories."""

from vaultflow.secret_vault import (
    InMemorySecretStore,
    SecretsManagerProvider,
    SecretsManagerStore,
    create_secret_provider,
    create_secret_store,
    is_test_mode,
)
from vaultflow.settings import SecretsManagerSettings, _reload_settings


def _configured_settings() -> SecretsManagerSettings:
    return SecretsManagerSettings(region_name="eu-west-1")


class TestFactory:
    """Test store selection from settings and environment."""

    def test_is_test_mode(self, monkeypatch):
        assert not is_test_mode()

        monkeypatch.setenv("VAULTFLOW_TEST_MODE", "TRUE")

        assert is_test_mode()

    def test_configured_settings_select_aws_store(self):
        store = create_secret_store(_configured_settings())

        assert isinstance(store, SecretsManagerStore)

    def test_missing_settings_select_memory_store(self):
        assert isinstance(create_secret_store(), InMemorySecretStore)

    def test_missing_settings_load_from_environment(self, monkeypatch):
        monkeypatch.setenv("SECRETSMANAGER_REGION_NAME", "eu-west-1")
        _reload_settings()

        provider = create_secret_provider()

        assert isinstance(provider.client, SecretsManagerStore)
        assert provider.client.sm_settings.region_name == "eu-west-1"

    def test_disabled_settings_select_memory_store(self):
        settings = SecretsManagerSettings(region_name="eu-west-1", use_secrets_manager=False)

        assert isinstance(create_secret_store(settings), InMemorySecretStore)

    def test_test_mode_selects_memory_store(self, monkeypatch):
        monkeypatch.setenv("VAULTFLOW_TEST_MODE", "true")

        assert isinstance(create_secret_store(_configured_settings()), InMemorySecretStore)

    def test_force_memory_with_seed(self):
        store = create_secret_store(_configured_settings(), force_memory=True, seed={"db": "1"})

        assert isinstance(store, InMemorySecretStore)
        assert store.secrets == {"db": "1"}

    def test_create_provider_with_seed(self):
        provider = create_secret_provider(seed={"db": '{"username": "test"}'}, force_memory=True)

        assert isinstance(provider, SecretsManagerProvider)
        assert provider.get_secret("db")["username"] == "test"

    def test_create_provider_uses_given_store(self):
        store = InMemorySecretStore()

        provider = create_secret_provider(_configured_settings(), store=store)

        assert provider.client is store
