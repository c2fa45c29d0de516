from typing import Optional

from pydantic import Field

from .base import VaultFlowBaseSettings
from .secrets_manager import SecretsManagerSettings


class _Settings(VaultFlowBaseSettings):
    """Top-level settings aggregating every domain settings object."""

    secrets_manager: SecretsManagerSettings = Field(default_factory=SecretsManagerSettings)


_settings: Optional[_Settings] = None


def get_settings(force_reload: bool = False) -> _Settings:
    """Get the singleton settings instance for the application.

    Settings are read from the environment (and ``.env``) on first access
    and reused afterwards.

    Args:
        force_reload: Build a fresh instance even if one exists

    Returns:
        The shared _Settings instance

    Example:
        >>> settings = get_settings()
        >>> settings.secrets_manager.region_name
        'eu-west-1'
    """
    global _settings

    if _settings is None or force_reload:
        _settings = _Settings()

    return _settings


def _reload_settings() -> _Settings:
    """Force reload of settings.

    This is primarily for testing purposes where you need to reset
    the singleton instance.

    Returns:
        A fresh _Settings instance
    """
    global _settings
    _settings = None
    return get_settings(force_reload=True)
