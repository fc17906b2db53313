"""Field type plugins and the default registry."""

from fieldtypes.application.services.field_type_registry import FieldTypeRegistry
from fieldtypes.field_types.base import FieldType
from fieldtypes.field_types.relation import RelationType, RelationValue


def default_registry() -> FieldTypeRegistry:
    """Return a registry holding the built-in field types."""
    return FieldTypeRegistry([RelationType()])


__all__ = [
    "FieldType",
    "RelationType",
    "RelationValue",
    "default_registry",
]
