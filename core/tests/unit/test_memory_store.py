"""Tests for the in-memory secret store."""

import pytest
from botocore.exceptions import ClientError

from vaultflow.common.exceptions import is_resource_not_found
from vaultflow.protocols import SecretStoreClient
from vaultflow.secret_vault import InMemorySecretStore


class TestInMemorySecretStore:
    """Test the store mirrors Secrets Manager error reporting."""

    def test_satisfies_protocol(self):
        assert isinstance(InMemorySecretStore(), SecretStoreClient)

    def test_seed_values_are_readable(self):
        store = InMemorySecretStore({"db": '"value"'})

        response = store.get_secret_value({"SecretId": "db"})

        assert response["SecretString"] == '"value"'
        assert response["Name"] == "db"

    def test_seed_is_copied(self):
        seed = {"db": '"value"'}
        store = InMemorySecretStore(seed)

        store.delete_secret({"SecretId": "db"})

        assert seed == {"db": '"value"'}

    @pytest.mark.parametrize(
        "operation",
        ["update_secret", "delete_secret", "get_secret_value"],
    )
    def test_unknown_secret_raises_not_found(self, operation):
        store = InMemorySecretStore()

        with pytest.raises(ClientError) as exc_info:
            getattr(store, operation)({"SecretId": "missing", "SecretString": "1"})

        assert is_resource_not_found(exc_info.value)

    def test_create_existing_secret_raises_resource_exists(self):
        store = InMemorySecretStore({"db": "1"})

        with pytest.raises(ClientError) as exc_info:
            store.create_secret({"Name": "db", "SecretString": "2"})

        assert exc_info.value.response["Error"]["Code"] == "ResourceExistsException"
        assert not is_resource_not_found(exc_info.value)
        assert store.secrets["db"] == "1"

    def test_calls_are_recorded(self):
        store = InMemorySecretStore()

        store.create_secret({"Name": "db", "SecretId": "db", "SecretString": "1"})
        store.update_secret({"SecretId": "db", "SecretString": "2"})

        assert store.operations() == ["CreateSecret", "UpdateSecret"]
        assert store.calls[1] == ("UpdateSecret", {"SecretId": "db", "SecretString": "2"})
        assert store.secrets == {"db": "2"}
