"""Registry of field types keyed by identifier (content type schema lookup)."""

from __future__ import annotations

from fieldtypes.application.interfaces.field_type import IFieldType
from fieldtypes.domain.exceptions import (
    FieldTypeAlreadyRegisteredException,
    FieldTypeNotFoundException,
)
from fieldtypes.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class FieldTypeRegistry:
    """Maps field type identifiers (e.g. 'ezobjectrelation') to plugins."""

    def __init__(self, field_types: list[IFieldType] | None = None) -> None:
        self._field_types: dict[str, IFieldType] = {}
        for field_type in field_types or []:
            self.register(field_type)

    def register(self, field_type: IFieldType) -> None:
        """Register a field type under its identifier.

        Raises:
            FieldTypeAlreadyRegisteredException: If the identifier is taken.
        """
        identifier = field_type.get_field_type_identifier()
        if identifier in self._field_types:
            raise FieldTypeAlreadyRegisteredException(identifier)
        self._field_types[identifier] = field_type
        logger.debug("Registered field type %s (%s)", identifier, type(field_type).__name__)

    def get(self, identifier: str) -> IFieldType:
        """Return the field type for identifier.

        Raises:
            FieldTypeNotFoundException: If nothing is registered under identifier.
        """
        try:
            return self._field_types[identifier]
        except KeyError:
            raise FieldTypeNotFoundException(identifier) from None

    def has(self, identifier: str) -> bool:
        return identifier in self._field_types

    def identifiers(self) -> list[str]:
        """Return registered identifiers, sorted."""
        return sorted(self._field_types)
