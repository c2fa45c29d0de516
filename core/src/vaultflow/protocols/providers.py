"""Provider protocol definitions.

This module defines the two seams of vaultflow: the remote secret store a
provider talks to, and the provider surface callers use. Both are
structural protocols, so any object with matching methods qualifies.
"""

from typing import Any, Dict, Mapping, Protocol, runtime_checkable

from vaultflow.types import Options, Secret


@runtime_checkable
class SecretStoreClient(Protocol):
    """Protocol for the remote secret-management service.

    Requests are mappings keyed by Secrets Manager field names (``SecretId``,
    ``Name``, ``SecretString``, ``ClientRequestToken`` plus whatever else the
    caller passed). A missing secret is signalled by raising
    ``botocore.exceptions.ClientError`` with the ``ResourceNotFoundException``
    error code. Every other failure is raised as-is.
    """

    def create_secret(self, request: Mapping[str, Any]) -> Dict[str, Any]:
        """Create a new secret named ``request["Name"]``."""
        ...

    def update_secret(self, request: Mapping[str, Any]) -> Dict[str, Any]:
        """Replace the value of ``request["SecretId"]``.

        Raises:
            ClientError: ResourceNotFoundException if the secret does not exist
        """
        ...

    def delete_secret(self, request: Mapping[str, Any]) -> Dict[str, Any]:
        """Delete ``request["SecretId"]`` and return once the store confirms."""
        ...

    def get_secret_value(self, request: Mapping[str, Any]) -> Dict[str, Any]:
        """Fetch ``request["SecretId"]``; the payload is under ``SecretString``.

        Raises:
            ClientError: ResourceNotFoundException if the secret does not exist
        """
        ...


@runtime_checkable
class SecretProvider(Protocol):
    """Protocol defining the caller-facing interface for secret providers.

    The protocol is marked as runtime_checkable to allow isinstance()
    checks at runtime, which is useful for validation and testing.
    """

    def put_secret(self, secret: Secret, options: Options = None) -> Secret:
        """Create or update a secret and return it unchanged."""
        ...

    def delete_secret(self, secret: Secret, options: Options = None) -> None:
        """Delete a secret from the remote store."""
        ...

    def get_secret(self, key: str, options: Options = None) -> Secret:
        """Retrieve a secret by key.

        Raises:
            SecretNotFoundError: If the remote store has no such secret
        """
        ...
