from enum import Enum
from typing import Any, Dict, Optional

from botocore.exceptions import ClientError

from vaultflow.constants import RESOURCE_NOT_FOUND_CODE


class ErrorCode(Enum):
    """Standard error codes for vaultflow operations.

    Each category has a specific number range for easy identification.

    Attributes:
        CONFIG_*: Configuration-related errors (1xxx)
        RESOURCE_*: Resource availability errors (5xxx)
        OPERATION_*: High-level operation errors (8xxx)
    """
    # Configuration errors (1xxx)
    CONFIG_ERROR = "CONFIG_001"

    # Resource errors (5xxx)
    SECRET_NOT_FOUND = "RESOURCE_004"

    # Operation errors (8xxx)
    OPERATION_ERROR = "OPERATION_001"


class VaultFlowError(Exception):
    """Base exception for all vaultflow-related errors.

    Uses error codes for categorization instead of a deep hierarchy of
    exception classes.

    Attributes:
        message: Error message
        error_code: Error code from ErrorCode enum
        details: Additional error details
        cause: Optional underlying exception
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.OPERATION_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        msg = f"[{self.error_code.value}] {self.message}"
        if self.cause:
            msg = f"{msg} (caused by: {type(self.cause).__name__}: {str(self.cause)})"
        return msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
        }


class SecretNotFoundError(VaultFlowError):
    """Raised when the remote store has no secret for the requested key.

    Attributes:
        key: The secret key that was looked up
    """

    def __init__(self, key: str, cause: Optional[Exception] = None):
        super().__init__(
            message=f"Secret '{key}' not found",
            error_code=ErrorCode.SECRET_NOT_FOUND,
            details={"key": key},
            cause=cause,
        )
        self.key = key

    @classmethod
    def with_key(cls, key: str, cause: Optional[Exception] = None) -> "SecretNotFoundError":
        return cls(key, cause=cause)


def is_resource_not_found(exc: BaseException) -> bool:
    """Check whether a remote store failure is a not-found condition.

    Args:
        exc: Exception raised by the secret store client

    Returns:
        True if the error is a botocore ClientError carrying the
        ResourceNotFoundException code, False otherwise
    """
    if not isinstance(exc, ClientError):
        return False
    return exc.response.get("Error", {}).get("Code") == RESOURCE_NOT_FOUND_CODE


def configuration_error(
    message: str,
    config_key: Optional[str] = None,
    **kwargs
) -> VaultFlowError:
    """Create a configuration error.

    Args:
        message: Error message
        config_key: Configuration key that caused the error
        **kwargs: Additional error details

    Returns:
        VaultFlowError with CONFIG_ERROR code
    """
    details = kwargs.get('details', {})
    if config_key:
        details["config_key"] = config_key

    return VaultFlowError(
        message=message,
        error_code=ErrorCode.CONFIG_ERROR,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )
