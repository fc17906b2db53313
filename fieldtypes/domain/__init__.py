"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on the application layer or on concrete field types.
"""

from fieldtypes.domain.entities import ContentInfo
from fieldtypes.domain.enums import FieldTypeEvent, SelectionMethod
from fieldtypes.domain.exceptions import (
    FieldTypeAlreadyRegisteredException,
    FieldTypeNotFoundException,
    InvalidArgumentException,
    InvalidArgumentType,
    RepositoryException,
)
from fieldtypes.domain.value_objects import FieldValidationError, FieldValue

__all__ = [
    # Entities
    "ContentInfo",
    # Enums
    "FieldTypeEvent",
    "SelectionMethod",
    # Exceptions
    "FieldTypeAlreadyRegisteredException",
    "FieldTypeNotFoundException",
    "InvalidArgumentException",
    "InvalidArgumentType",
    "RepositoryException",
    # Value objects
    "FieldValidationError",
    "FieldValue",
]
