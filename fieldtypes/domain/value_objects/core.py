"""Domain value objects shared by all field types.

Value objects are immutable types that represent domain concepts. They
have no identity, only value.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class FieldValue:
    """Persistence-layer envelope for a field value.

    data is what the storage engine writes for the field, external_data is
    handed to external storage handlers, and sort_key feeds sortable
    indexes (None when the type does not provide one).
    """

    data: Any = None
    external_data: Any = None
    sort_key: str | int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the envelope in storage wire shape (camelCase keys)."""
        return {
            "data": self.data,
            "externalData": self.external_data,
            "sortKey": self.sort_key,
        }


@dataclass(frozen=True)
class FieldValidationError:
    """A single validation problem found in settings or configuration.

    Returned in lists rather than raised, so callers can report all
    problems at once.
    """

    message: str
    target: str | None = None
    values: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        if self.target:
            return f"{self.target}: {self.message}"
        return self.message
