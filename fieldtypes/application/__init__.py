"""Application layer: interfaces and services.

Depends only on domain and protocol definitions (DIP). Concrete field
types implement the interfaces.
"""

from fieldtypes.application.interfaces import IContentReference, IFieldType
from fieldtypes.application.services import FieldTypeRegistry, SettingsSchemaValidator

__all__ = [
    "FieldTypeRegistry",
    "IContentReference",
    "IFieldType",
    "SettingsSchemaValidator",
]
