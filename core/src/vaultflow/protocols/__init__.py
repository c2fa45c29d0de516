"""Protocol definitions for vaultflow.

Protocols provide type-safe interfaces without requiring inheritance,
following Python's structural subtyping (duck typing with type hints).
"""

from .providers import SecretProvider, SecretStoreClient

__all__ = [
    "SecretProvider",
    "SecretStoreClient",
]
