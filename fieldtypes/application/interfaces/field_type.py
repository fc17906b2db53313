"""Field type interfaces (ports) for the hosting platform.

Protocols define the contract every field type plugin offers (DIP).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from fieldtypes.domain.enums import FieldTypeEvent
from fieldtypes.domain.value_objects.core import FieldValidationError, FieldValue


@runtime_checkable
class IContentReference(Protocol):
    """Anything that identifies a content item by integer id (e.g. ContentInfo)."""

    id: int


class IFieldType(Protocol):
    """Protocol for a field type plugin selected by its identifier."""

    def get_field_type_identifier(self) -> str:
        """Return the type tag used by the content type schema (e.g. 'ezobjectrelation')."""

    def build_value(self, input_value: Any) -> Any:
        """Build a value object from a caller-supplied plain input."""

    def get_default_default_value(self) -> Any:
        """Return the fallback default when the field definition has none."""

    def accept_value(self, input_value: Any) -> Any:
        """Check the type and structure of a value; return it unchanged or raise."""

    def from_hash(self, hash_value: Any) -> Any:
        """Convert a hash (import/export, API transport) to a value."""

    def to_hash(self, value: Any) -> Any:
        """Convert a value to its hash representation."""

    def is_searchable(self) -> bool:
        """Return whether fields of this type are indexed for search."""

    def to_persistence_value(self, value: Any) -> FieldValue:
        """Convert a value to the storage envelope."""

    def from_persistence_value(self, field_value: FieldValue) -> Any:
        """Convert a storage envelope back to a value."""

    def handle_event(
        self,
        event: FieldTypeEvent | str,
        repository: Any,
        field_definition: Any,
        field: Any,
    ) -> None:
        """React to a content lifecycle event (prePublish, postPublish, preCreate, postCreate)."""

    def get_settings_schema(self) -> Mapping[str, Mapping[str, Any]]:
        """Return the read-only field settings schema."""

    def validate_field_settings(self, field_settings: Any) -> list[FieldValidationError]:
        """Return validation errors for field definition settings (empty when valid)."""
