from vaultflow.__version__ import __version__

from vaultflow.types import Secret, RequestOptions
from vaultflow.common.exceptions import VaultFlowError, ErrorCode, SecretNotFoundError

from vaultflow.secret_vault import (
    SecretProvider,
    SecretStoreClient,
    SecretsManagerProvider,
    SecretsManagerStore,
    InMemorySecretStore,
    create_secret_provider,
    create_secret_store,
)


__all__ = [
    "__version__",

    "Secret",
    "RequestOptions",

    # Providers and stores
    "SecretProvider",
    "SecretStoreClient",
    "SecretsManagerProvider",
    "SecretsManagerStore",
    "InMemorySecretStore",
    "create_secret_provider",
    "create_secret_store",

    # Exceptions (public API)
    "VaultFlowError",
    "ErrorCode",
    "SecretNotFoundError",
]
