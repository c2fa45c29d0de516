"""Secrets Manager connection settings.

This module contains only the configuration needed to build a boto3
``secretsmanager`` client. The request logic lives in the secret_vault
package.
"""

from typing import Optional
from pydantic import Field, SecretStr
from pydantic_settings import SettingsConfigDict

from .base import VaultFlowBaseSettings


class SecretsManagerSettings(VaultFlowBaseSettings):
    """Configuration settings for AWS Secrets Manager.

    Credentials are optional: when access_key_id is unset, boto3 resolves
    credentials through its usual chain (environment, profile, instance
    role). Retries and timeouts are applied to the botocore client, never
    by the provider.
    """

    model_config = SettingsConfigDict(
        env_prefix="SECRETSMANAGER_",
        case_sensitive=False
    )

    region_name: Optional[str] = Field(
        None,
        description="AWS region hosting the secrets (e.g., eu-west-1)"
    )
    endpoint_url: Optional[str] = Field(
        None,
        description="Custom endpoint, e.g. a LocalStack URL (http://localhost:4566)"
    )
    profile_name: Optional[str] = Field(
        None,
        description="Named profile from the shared AWS config files"
    )
    use_secrets_manager: bool = Field(
        default=True,
        description="Whether to use AWS Secrets Manager for secrets"
    )

    access_key_id: Optional[str] = Field(
        None,
        description="Static AWS access key ID"
    )
    secret_access_key: Optional[SecretStr] = Field(
        None,
        description="Static AWS secret access key"
    )
    session_token: Optional[SecretStr] = Field(
        None,
        description="Session token for temporary credentials"
    )

    max_attempts: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Total attempts botocore makes per request, first call included"
    )
    connect_timeout: float = Field(
        default=5.0,
        gt=0,
        le=300.0,
        description="Connection timeout in seconds"
    )
    read_timeout: float = Field(
        default=30.0,
        gt=0,
        le=300.0,
        description="Read timeout in seconds"
    )

    @property
    def is_configured(self) -> bool:
        """Check if Secrets Manager is properly configured.

        Returns:
            True if enabled and a region or endpoint is provided
        """
        return bool(self.use_secrets_manager and (self.region_name or self.endpoint_url))
