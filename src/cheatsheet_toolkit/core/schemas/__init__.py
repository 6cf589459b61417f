from .validator import ValidationError, validate_items

__all__ = [
    "ValidationError",
    "validate_items",
]
