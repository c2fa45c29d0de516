"""Base model class for all vaultflow models with serialization support."""

from typing import Any, Dict
from pydantic import BaseModel, ConfigDict


class VaultBaseModel(BaseModel):
    """Base model for all vaultflow models with built-in serialization.

    Provides common functionality for all vaultflow models including:
    - Serialization to dictionary via to_dict()
    - Consistent configuration
    """
    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        use_enum_values=True,
        validate_assignment=True
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert model to dictionary for serialization.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return self.model_dump(by_alias=False, exclude_none=True)
