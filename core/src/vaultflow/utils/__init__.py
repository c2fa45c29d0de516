from vaultflow.utils.decorators import traced

__all__ = [
    "traced",
]
