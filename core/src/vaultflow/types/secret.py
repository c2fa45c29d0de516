"""Secret value type.

A Secret pairs a unique string key with an arbitrary JSON value. Instances
are frozen: a new value means a new Secret.
"""

from typing import Any

from pydantic import ConfigDict, Field, JsonValue

from vaultflow.types.base import VaultBaseModel


class Secret(VaultBaseModel):
    """Immutable key/value pair stored in a secret store.

    The value may be any JSON value (string, number, boolean, null, list or
    string-keyed mapping, nested arbitrarily). Mapping values can be read
    field by field with item access.

    Attributes:
        key: Unique secret identifier in the remote store
        value: Structured payload of the secret

    Example:
        >>> secret = Secret("db", {"username": "test", "password": "testpass"})
        >>> secret["username"]
        'test'
        >>> "password" in secret
        True
    """
    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1)
    value: JsonValue = None

    def __init__(self, key: str, value: Any = None) -> None:
        super().__init__(key=key, value=value)

    def get_key(self) -> str:
        return self.key

    def get_value(self) -> JsonValue:
        return self.value

    def __getitem__(self, field: Any) -> JsonValue:
        if not isinstance(self.value, (dict, list)):
            raise TypeError(
                f"Secret '{self.key}' holds a {type(self.value).__name__} value, "
                "which does not support field access"
            )
        return self.value[field]

    def __contains__(self, field: Any) -> bool:
        if isinstance(self.value, dict):
            return field in self.value
        if isinstance(self.value, list):
            return isinstance(field, int) and -len(self.value) <= field < len(self.value)
        return False

    def get(self, field: Any, default: Any = None) -> JsonValue:
        """Return a field of the secret value, or default when absent."""
        if field in self:
            return self[field]
        return default

    def __repr__(self) -> str:
        # Never render the payload
        return f"Secret(key={self.key!r})"

    __str__ = __repr__
