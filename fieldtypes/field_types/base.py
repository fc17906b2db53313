"""Base class for field type plugins (implements IFieldType).

Concrete types declare their settings schema and implement value
construction, validation and hash conversion. Persistence conversion,
settings validation and the event hook have defaults here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, ClassVar

from fieldtypes.application.services.settings_schema_validator import (
    SettingsSchemaValidator,
)
from fieldtypes.domain.enums import FieldTypeEvent
from fieldtypes.domain.value_objects.core import FieldValidationError, FieldValue
from fieldtypes.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class FieldType(ABC):
    """Abstract field type (OCP: one subclass per kind of field)."""

    # {name: {"type": ..., "default": ...}}; read-only, set once per class.
    settings_schema: ClassVar[Mapping[str, Mapping[str, Any]]] = MappingProxyType({})
    # Extra JSON Schema keywords per setting (e.g. enum of allowed values).
    settings_constraints: ClassVar[Mapping[str, Mapping[str, Any]]] = MappingProxyType({})
    validator_configuration_schema: ClassVar[Mapping[str, Any]] = MappingProxyType({})

    @abstractmethod
    def get_field_type_identifier(self) -> str:
        """Return the identifier the content type schema selects this type by."""
        ...

    @abstractmethod
    def build_value(self, input_value: Any) -> Any:
        ...

    @abstractmethod
    def get_default_default_value(self) -> Any:
        """Return the fallback default when the field definition provides none."""
        ...

    @abstractmethod
    def accept_value(self, input_value: Any) -> Any:
        """Check type and structure of input_value; return it or raise InvalidArgumentException."""
        ...

    @abstractmethod
    def from_hash(self, hash_value: Any) -> Any:
        ...

    @abstractmethod
    def to_hash(self, value: Any) -> Any:
        ...

    @abstractmethod
    def _get_sort_info(self, value: Any) -> str | int | None:
        """Return the sort key for value (FieldValue.sort_key)."""
        ...

    def is_searchable(self) -> bool:
        return False

    def to_persistence_value(self, value: Any) -> FieldValue:
        """Convert value to the storage envelope (hash as data, sort info as sort key)."""
        return FieldValue(
            data=self.to_hash(value),
            external_data=None,
            sort_key=self._get_sort_info(value),
        )

    def from_persistence_value(self, field_value: FieldValue) -> Any:
        return self.from_hash(field_value.data)

    def handle_event(
        self,
        event: FieldTypeEvent | str,
        repository: Any,
        field_definition: Any,
        field: Any,
    ) -> None:
        """Lifecycle hook (prePublish, postPublish, preCreate, postCreate).

        Does nothing by default; types that keep external data override it.
        """
        logger.debug(
            "Field type %s ignoring event %s",
            self.get_field_type_identifier(),
            getattr(event, "value", event),
        )

    def get_settings_schema(self) -> Mapping[str, Mapping[str, Any]]:
        return self.settings_schema

    def get_validator_configuration_schema(self) -> Mapping[str, Any]:
        return self.validator_configuration_schema

    def apply_default_settings(self, field_settings: Mapping[str, Any]) -> dict[str, Any]:
        """Return a copy of field_settings with missing schema defaults filled in.

        Args:
            field_settings: Settings from the field definition (may be partial).

        Returns:
            New dict; unknown keys are kept as given.
        """
        applied = dict(field_settings)
        for name, definition in self.settings_schema.items():
            applied.setdefault(name, definition.get("default"))
        return applied

    def validate_field_settings(self, field_settings: Any) -> list[FieldValidationError]:
        """Validate field definition settings against the settings schema.

        Returns:
            List of errors; empty when settings are valid.
        """
        errors = SettingsSchemaValidator(
            self.settings_schema, self.settings_constraints
        ).validate(field_settings)
        if errors:
            logger.debug(
                "Rejected settings for %s: %s",
                self.get_field_type_identifier(),
                "; ".join(str(e) for e in errors),
            )
        return errors

    def validate_validator_configuration(
        self, validator_configuration: Mapping[str, Any]
    ) -> list[FieldValidationError]:
        """Return an error for every validator not declared in the configuration schema."""
        return [
            FieldValidationError(
                f"Validator '{name}' is unknown",
                target=str(name),
                values={"validator": name},
            )
            for name in validator_configuration
            if name not in self.validator_configuration_schema
        ]

    def validate(self, field_definition: Any, value: Any) -> list[FieldValidationError]:
        """Validate value against field_definition constraints (none by default)."""
        return []

    def is_empty_value(self, value: Any) -> bool:
        return value is None or value == self.get_default_default_value()

    def get_name(self, value: Any) -> str:
        """Return a human-readable name for value."""
        return str(value)
