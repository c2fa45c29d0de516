"""Factory for creating secret stores and providers.

This module provides factory functions for wiring a SecretsManagerProvider
to the appropriate remote store based on configuration and environment.
"""

from typing import Dict, Optional, TYPE_CHECKING
import os

from vaultflow.logging import get_logger
from vaultflow.protocols.providers import SecretStoreClient
from .aws import SecretsManagerStore
from .memory import InMemorySecretStore
from .provider import SecretsManagerProvider

if TYPE_CHECKING:
    from vaultflow.settings.secrets_manager import SecretsManagerSettings

logger = get_logger(__name__)


def is_test_mode() -> bool:
    """Check if the application is running in test mode.

    Returns:
        True if VAULTFLOW_TEST_MODE="true" (case-insensitive), False otherwise
    """
    return os.getenv("VAULTFLOW_TEST_MODE", "").lower() == "true"


def create_secret_store(
    settings: Optional['SecretsManagerSettings'] = None,
    force_memory: bool = False,
    seed: Optional[Dict[str, str]] = None,
) -> SecretStoreClient:
    """Create the appropriate secret store based on configuration.

    Args:
        settings: Secrets Manager connection settings; loaded from the
            environment through get_settings() when omitted
        force_memory: If True, always create an in-memory store
        seed: Initial SecretString values for an in-memory store

    Returns:
        SecretStoreClient implementation (SecretsManagerStore or InMemorySecretStore)
    """
    use_memory = force_memory or is_test_mode()

    if not use_memory and settings is None:
        from vaultflow.settings import get_settings
        settings = get_settings().secrets_manager

    if not use_memory and settings and settings.is_configured:
        return SecretsManagerStore(settings)

    logger.info("Using in-memory secret store")
    return InMemorySecretStore(seed)


def create_secret_provider(
    settings: Optional['SecretsManagerSettings'] = None,
    store: Optional[SecretStoreClient] = None,
    force_memory: bool = False,
    seed: Optional[Dict[str, str]] = None,
) -> SecretsManagerProvider:
    """Create a SecretsManagerProvider over the given or configured store.

    Example:
        >>> from vaultflow.settings import SecretsManagerSettings
        >>> from vaultflow.secret_vault import create_secret_provider
        >>>
        >>> # Production: AWS Secrets Manager
        >>> provider = create_secret_provider(SecretsManagerSettings(region_name="eu-west-1"))
        >>>
        >>> # Testing: in-memory store
        >>> provider = create_secret_provider(seed={"db": '{"username": "test"}'}, force_memory=True)
    """
    if store is None:
        store = create_secret_store(settings, force_memory=force_memory, seed=seed)
    return SecretsManagerProvider(store)
