"""Tests for FieldTypeRegistry and the default registry."""

import pytest

from fieldtypes.application.services.field_type_registry import FieldTypeRegistry
from fieldtypes.domain.exceptions import (
    FieldTypeAlreadyRegisteredException,
    FieldTypeNotFoundException,
)
from fieldtypes.field_types import default_registry
from fieldtypes.field_types.relation import RelationType


def test_default_registry_selects_relation_by_identifier() -> None:
    """The built-in registry maps 'ezobjectrelation' to RelationType."""
    registry = default_registry()
    assert registry.has("ezobjectrelation") is True
    assert isinstance(registry.get("ezobjectrelation"), RelationType)
    assert registry.identifiers() == ["ezobjectrelation"]


def test_register_and_get() -> None:
    registry = FieldTypeRegistry()
    relation_type = RelationType(strict_hash=True)
    registry.register(relation_type)
    assert registry.get("ezobjectrelation") is relation_type


def test_duplicate_registration_rejected() -> None:
    """Registering a second type under the same identifier raises."""
    registry = FieldTypeRegistry([RelationType(strict_hash=True)])
    with pytest.raises(FieldTypeAlreadyRegisteredException) as exc_info:
        registry.register(RelationType(strict_hash=False))
    assert exc_info.value.details == {"identifier": "ezobjectrelation"}


def test_unknown_identifier_raises() -> None:
    """get() on an unknown identifier raises FieldTypeNotFoundException."""
    registry = FieldTypeRegistry()
    assert registry.has("ezstring") is False
    with pytest.raises(FieldTypeNotFoundException) as exc_info:
        registry.get("ezstring")
    assert exc_info.value.error_code == "FIELD_TYPE_NOT_FOUND"
    assert "ezstring" in exc_info.value.message
