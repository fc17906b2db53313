"""Application interfaces (ports): protocols implemented by field types."""

from fieldtypes.application.interfaces.field_type import IContentReference, IFieldType

__all__ = [
    "IContentReference",
    "IFieldType",
]
