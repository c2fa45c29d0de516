"""Value types shared across vaultflow."""

from vaultflow.types.base import VaultBaseModel
from vaultflow.types.options import Options, RequestOptions, build_request
from vaultflow.types.secret import Secret

__all__ = [
    "VaultBaseModel",
    "Options",
    "RequestOptions",
    "build_request",
    "Secret",
]
