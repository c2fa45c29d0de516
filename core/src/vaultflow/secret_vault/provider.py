"""Secrets Manager backed secret provider.

This module provides SecretsManagerProvider, the upsert/read/delete adapter
between callers and a remote secret store implementing SecretStoreClient.
"""

import base64
import secrets
import threading
from typing import Any, Dict

from botocore.exceptions import ClientError

from vaultflow.common.exceptions import SecretNotFoundError, is_resource_not_found
from vaultflow.constants import REQUEST_TOKEN_BYTES, RequestField
from vaultflow.logging import get_logger
from vaultflow.protocols.providers import SecretStoreClient
from vaultflow.secret_vault.codec import decode_value, encode_value
from vaultflow.types import Options, Secret, build_request
from vaultflow.utils.decorators import traced

logger = get_logger(__name__)


def generate_request_token() -> str:
    """Return a base64-encoded random idempotency token."""
    return base64.b64encode(secrets.token_bytes(REQUEST_TOKEN_BYTES)).decode("ascii")


def _secret_attributes(provider: Any, secret: Secret, *args: Any, **kwargs: Any) -> Dict[str, Any]:
    return {"vaultflow.secret.key": secret.key}


def _key_attributes(provider: Any, key: str, *args: Any, **kwargs: Any) -> Dict[str, Any]:
    return {"vaultflow.secret.key": key}


class SecretsManagerProvider:
    """Secret provider backed by a remote secret store.

    Writes are upserts: an update is attempted first and a create follows
    only when the store reports the secret does not exist. Reads go through
    a per-instance cache.

    Note: The cache is never invalidated by put_secret or delete_secret.
    Once a key has been read, every later get_secret on the same provider
    returns that same Secret instance, even after the key is overwritten or
    deleted through this provider. Call clear_cache() to force a re-read.

    Concurrent misses on the same key may each fetch from the store; the
    last one to finish wins the cache slot.

    Attributes:
        client: The remote secret store
        _cache: Secrets read so far, keyed by secret key
    """

    def __init__(self, client: SecretStoreClient):
        """Initialize the provider.

        Args:
            client: Remote store implementing SecretStoreClient
        """
        self.client = client
        self._cache: Dict[str, Secret] = {}
        self._cache_lock = threading.Lock()

    @traced("vaultflow.put_secret", attribute_getter=_secret_attributes)
    def put_secret(self, secret: Secret, options: Options = None) -> Secret:
        """Create or update a secret in the remote store.

        Args:
            secret: Secret to store; its value is JSON-encoded
            options: Extra request fields for the remote store. A
                ClientRequestToken is generated when none is given.

        Returns:
            The secret passed in, unchanged

        Raises:
            ClientError: Any remote failure other than not-found on update
        """
        request = build_request(
            options,
            **{
                RequestField.SECRET_ID.value: secret.key,
                RequestField.SECRET_STRING.value: encode_value(secret.value),
            },
        )
        if request.get(RequestField.CLIENT_REQUEST_TOKEN.value) is None:
            request[RequestField.CLIENT_REQUEST_TOKEN.value] = generate_request_token()

        try:
            self.client.update_secret(request)
        except ClientError as exc:
            if not is_resource_not_found(exc):
                raise
            logger.debug("Secret %s does not exist, creating it", secret.key)
            request[RequestField.NAME.value] = secret.key
            self.client.create_secret(request)

        return secret

    @traced("vaultflow.delete_secret", attribute_getter=_secret_attributes)
    def delete_secret(self, secret: Secret, options: Options = None) -> None:
        """Delete a secret from the remote store.

        Args:
            secret: Secret to delete; only its key is used
            options: Extra request fields, e.g. RecoveryWindowInDays

        Raises:
            ClientError: Any remote failure, not-found included
        """
        request = build_request(options, **{RequestField.SECRET_ID.value: secret.key})
        self.client.delete_secret(request)

    @traced("vaultflow.get_secret", attribute_getter=_key_attributes)
    def get_secret(self, key: str, options: Options = None) -> Secret:
        """Retrieve a secret, from the cache when already read.

        Args:
            key: Secret key in the remote store
            options: Extra request fields, e.g. VersionStage. Ignored on
                a cache hit.

        Returns:
            The cached or freshly fetched Secret

        Raises:
            SecretNotFoundError: If the remote store has no such secret
            ClientError: Any other remote failure
            json.JSONDecodeError: If the stored payload is not valid JSON
        """
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Secret %s served from cache", key)
            return cached

        request = build_request(options, **{RequestField.SECRET_ID.value: key})
        try:
            response = self.client.get_secret_value(request)
        except ClientError as exc:
            if is_resource_not_found(exc):
                raise SecretNotFoundError.with_key(key, cause=exc) from exc
            raise

        payload = response.get(RequestField.SECRET_STRING.value)
        secret = Secret(key, decode_value(payload if payload is not None else ""))

        with self._cache_lock:
            self._cache[key] = secret
        logger.debug("Secret %s fetched and cached", key)
        return secret

    def is_cached(self, key: str) -> bool:
        """Report whether key has been read and cached by this provider."""
        return key in self._cache

    def clear_cache(self) -> None:
        """Drop every cached secret so the next reads hit the remote store."""
        with self._cache_lock:
            self._cache.clear()
