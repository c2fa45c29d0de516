"""AWS Secrets Manager store implementation.

This module provides the SecretsManagerStore class which implements the
SecretStoreClient protocol on top of a boto3 ``secretsmanager`` client.
"""

from typing import Any, Dict, Mapping, Optional, TYPE_CHECKING

import boto3
from botocore.config import Config

from vaultflow.common.exceptions import configuration_error
from vaultflow.constants import SECRETS_MANAGER_SERVICE, RequestField
from vaultflow.logging import get_logger

if TYPE_CHECKING:
    from vaultflow.settings.secrets_manager import SecretsManagerSettings

logger = get_logger(__name__)


class SecretsManagerStore:
    """AWS Secrets Manager transport.

    Requests are forwarded to boto3 as keyword arguments. botocore errors,
    including ``ResourceNotFoundException``, propagate unchanged so the
    provider can tell a missing secret from any other failure.

    Attributes:
        sm_settings: Connection settings used to build the client
        _client: Lazy-loaded boto3 client, or the one injected
    """

    def __init__(
        self,
        settings: Optional['SecretsManagerSettings'] = None,
        client: Optional[Any] = None,
    ):
        """Initialize the store.

        Args:
            settings: Connection settings; required unless client is given
            client: Pre-built boto3 secretsmanager client
        """
        if settings is None and client is None:
            raise configuration_error(
                "SecretsManagerStore needs either settings or a boto3 client"
            )
        self.sm_settings = settings
        self._client = client

    @property
    def client(self) -> Any:
        """Get or create the boto3 secretsmanager client."""
        if self._client is None:
            settings = self.sm_settings
            if not settings.is_configured:
                raise configuration_error(
                    "Secrets Manager is not configured; set SECRETSMANAGER_REGION_NAME "
                    "or SECRETSMANAGER_ENDPOINT_URL",
                    config_key="region_name",
                )

            session = boto3.Session(
                profile_name=settings.profile_name,
                region_name=settings.region_name,
            )

            credentials: Dict[str, Any] = {}
            if settings.access_key_id and settings.secret_access_key:
                credentials["aws_access_key_id"] = settings.access_key_id
                credentials["aws_secret_access_key"] = settings.secret_access_key.get_secret_value()
                if settings.session_token:
                    credentials["aws_session_token"] = settings.session_token.get_secret_value()

            self._client = session.client(
                SECRETS_MANAGER_SERVICE,
                endpoint_url=settings.endpoint_url,
                config=Config(
                    retries={"total_max_attempts": settings.max_attempts, "mode": "standard"},
                    connect_timeout=settings.connect_timeout,
                    read_timeout=settings.read_timeout,
                ),
                **credentials,
            )
            logger.info(
                "Created Secrets Manager client",
                extra={"region": settings.region_name, "endpoint_url": settings.endpoint_url},
            )

        return self._client

    def create_secret(self, request: Mapping[str, Any]) -> Dict[str, Any]:
        # CreateSecret identifies the secret by Name only
        kwargs = {k: v for k, v in request.items() if k != RequestField.SECRET_ID.value}
        return self.client.create_secret(**kwargs)

    def update_secret(self, request: Mapping[str, Any]) -> Dict[str, Any]:
        return self.client.update_secret(**request)

    def delete_secret(self, request: Mapping[str, Any]) -> Dict[str, Any]:
        return self.client.delete_secret(**request)

    def get_secret_value(self, request: Mapping[str, Any]) -> Dict[str, Any]:
        return self.client.get_secret_value(**request)
