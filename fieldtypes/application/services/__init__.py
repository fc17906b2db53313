"""Application services: field type registry and settings validation."""

from fieldtypes.application.services.field_type_registry import FieldTypeRegistry
from fieldtypes.application.services.settings_schema_validator import (
    SettingsSchemaValidator,
    to_json_schema,
)

__all__ = [
    "FieldTypeRegistry",
    "SettingsSchemaValidator",
    "to_json_schema",
]
