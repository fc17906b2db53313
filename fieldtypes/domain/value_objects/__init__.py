"""Domain value objects and shared value types."""

from fieldtypes.domain.value_objects.core import FieldValidationError, FieldValue

__all__ = [
    "FieldValue",
    "FieldValidationError",
]
