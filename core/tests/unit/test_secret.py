"""Tests for the Secret value type."""

import pytest
from pydantic import ValidationError

from vaultflow.types import Secret


class TestSecret:
    """Test Secret construction, immutability and field access."""

    def test_positional_and_keyword_construction_match(self):
        assert Secret("db", {"a": 1}) == Secret(key="db", value={"a": 1})

    def test_accessors(self):
        secret = Secret("db", {"username": "test"})

        assert secret.get_key() == "db"
        assert secret.get_value() == {"username": "test"}

    def test_field_access_on_mapping(self):
        secret = Secret("db", {"username": "test", "password": "testpass"})

        assert secret["username"] == "test"
        assert "password" in secret
        assert "host" not in secret
        assert secret.get("host", "localhost") == "localhost"

    def test_missing_field_raises_key_error(self):
        secret = Secret("db", {"username": "test"})

        with pytest.raises(KeyError):
            secret["password"]

    def test_field_access_on_list(self):
        secret = Secret("hosts", ["a", "b"])

        assert secret[1] == "b"
        assert 1 in secret
        assert 2 not in secret
        assert secret.get(5) is None

    def test_field_access_on_scalar_raises_type_error(self):
        secret = Secret("token", "abc")

        with pytest.raises(TypeError) as exc_info:
            secret["anything"]

        assert "token" in str(exc_info.value)
        assert "anything" not in secret

    def test_secret_is_immutable(self):
        secret = Secret("db", "value")

        with pytest.raises(ValidationError):
            secret.value = "other"

    def test_empty_key_is_rejected(self):
        with pytest.raises(ValidationError):
            Secret("", "value")

    def test_non_json_value_is_rejected(self):
        with pytest.raises(ValidationError):
            Secret("db", {"when": object()})

    def test_scalar_types_are_preserved(self):
        secret = Secret("mixed", [True, 1, 1.5, None, "s"])

        assert [type(item) for item in secret.value] == [bool, int, float, type(None), str]

    def test_repr_hides_value(self):
        secret = Secret("db", {"password": "hunter2"})

        assert "hunter2" not in repr(secret)
        assert "hunter2" not in str(secret)
        assert "db" in repr(secret)
