"""Secret vault package for storing and reading secrets in a remote store.

SecretsManagerProvider gives callers upsert/read/delete over any store
implementing the SecretStoreClient protocol: AWS Secrets Manager through
SecretsManagerStore, or InMemorySecretStore for tests and development.
"""

from vaultflow.protocols.providers import SecretProvider, SecretStoreClient
from .aws import SecretsManagerStore
from .codec import decode_value, encode_value
from .factory import create_secret_provider, create_secret_store, is_test_mode
from .memory import InMemorySecretStore
from .provider import SecretsManagerProvider, generate_request_token

__all__ = [
    "SecretProvider",
    "SecretStoreClient",
    "SecretsManagerProvider",
    "SecretsManagerStore",
    "InMemorySecretStore",
    "create_secret_provider",
    "create_secret_store",
    "is_test_mode",
    "encode_value",
    "decode_value",
    "generate_request_token",
]
