"""Common exceptions for vaultflow.

Exception Design:
    The exception system uses error codes for categorization rather than
    numerous specific exception classes. All exceptions inherit from
    VaultFlowError and include structured error information.

    Remote store failures are never wrapped. The only translation is a
    not-found on read, which becomes SecretNotFoundError.
"""

from vaultflow.common.exceptions import (
    VaultFlowError,
    ErrorCode,
    SecretNotFoundError,
    is_resource_not_found,
    configuration_error,
)

__all__ = [
    "VaultFlowError",
    "ErrorCode",
    "SecretNotFoundError",
    "is_resource_not_found",
    "configuration_error",
]
