"""Relation field type (ezobjectrelation)."""

from fieldtypes.field_types.relation.destination import (
    ByExternalId,
    ById,
    Destination,
    FromReference,
    resolve_content_id,
    to_destination,
)
from fieldtypes.field_types.relation.relation_type import RelationType
from fieldtypes.field_types.relation.value import RelationValue

__all__ = [
    "ByExternalId",
    "ById",
    "Destination",
    "FromReference",
    "RelationType",
    "RelationValue",
    "resolve_content_id",
    "to_destination",
]
