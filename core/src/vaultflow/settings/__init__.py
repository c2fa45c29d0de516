"""Settings module providing configuration management for vaultflow.

Built on Pydantic Settings: values come from environment variables (and a
``.env`` file), are validated on construction, and fall back to code
defaults.

Environment Variable Naming:
    - Base settings: APP_ENV, LOG_LEVEL
    - Secrets Manager: SECRETSMANAGER_ prefix (e.g., SECRETSMANAGER_REGION_NAME)

Quick Start:
    >>> from vaultflow.settings import get_settings
    >>> settings = get_settings()
    >>> settings.secrets_manager.is_configured
    True
"""

from .main import _Settings, get_settings, _reload_settings
from .base import VaultFlowBaseSettings
from .secrets_manager import SecretsManagerSettings

__all__ = [
    "_Settings",
    "get_settings",
    "_reload_settings",
    "VaultFlowBaseSettings",
    "SecretsManagerSettings",
]
