"""Relation field value."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RelationValue:
    """Value of a relation field: the id of the destination content item.

    destination_content_id is a numeric content id or a string (e.g. a
    remote id); None is the empty relation. Not validated on construction,
    RelationType.accept_value checks it.
    """

    destination_content_id: Any = None

    def __str__(self) -> str:
        if self.destination_content_id is None:
            return ""
        return str(self.destination_content_id)
