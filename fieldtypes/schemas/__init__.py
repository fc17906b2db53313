"""Wire schemas (pydantic) for field type hash representations."""

from fieldtypes.schemas.relation import RelationHash

__all__ = ["RelationHash"]
