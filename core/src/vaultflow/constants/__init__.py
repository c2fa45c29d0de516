"""Constants module for vaultflow.

This module contains constant values and enumerations used throughout
vaultflow. It has no dependencies on other vaultflow modules.
"""

from vaultflow.constants.secrets_manager import (
    RequestField,
    RESOURCE_NOT_FOUND_CODE,
    RESOURCE_EXISTS_CODE,
    REQUEST_TOKEN_BYTES,
    SECRETS_MANAGER_SERVICE,
)

__all__ = [
    "RequestField",
    "RESOURCE_NOT_FOUND_CODE",
    "RESOURCE_EXISTS_CODE",
    "REQUEST_TOKEN_BYTES",
    "SECRETS_MANAGER_SERVICE",
]
