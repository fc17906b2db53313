"""Validates field definition settings against a field type's settings schema."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import jsonschema

from fieldtypes.domain.value_objects.core import FieldValidationError

# Settings schema type names -> JSON Schema types ("mixed" is unconstrained).
_JSON_TYPES: dict[str, str | None] = {
    "int": "integer",
    "integer": "integer",
    "string": "string",
    "bool": "boolean",
    "boolean": "boolean",
    "float": "number",
    "array": "array",
    "hash": "object",
    "mixed": None,
}


def to_json_schema(
    settings_schema: Mapping[str, Mapping[str, Any]],
    constraints: Mapping[str, Mapping[str, Any]] | None = None,
) -> dict[str, Any]:
    """Build a JSON Schema object describing the settings.

    Args:
        settings_schema: Field type schema, {name: {"type": ..., "default": ...}}.
        constraints: Extra JSON Schema keywords per setting (e.g. enum).

    Returns:
        JSON Schema dict for an object whose properties are the settings.
    """
    properties: dict[str, Any] = {}
    for name, definition in settings_schema.items():
        prop: dict[str, Any] = {}
        json_type = _JSON_TYPES.get(definition.get("type", "mixed"))
        if json_type:
            prop["type"] = json_type
        if constraints and name in constraints:
            prop.update(constraints[name])
        properties[name] = prop
    return {"type": "object", "properties": properties}


class SettingsSchemaValidator:
    """Checks settings for unknown names and type/constraint mismatches."""

    def __init__(
        self,
        settings_schema: Mapping[str, Mapping[str, Any]],
        constraints: Mapping[str, Mapping[str, Any]] | None = None,
    ) -> None:
        self.settings_schema = settings_schema
        self._validator = jsonschema.Draft7Validator(
            to_json_schema(settings_schema, constraints)
        )

    def validate(self, field_settings: Any) -> list[FieldValidationError]:
        """Return all problems found in field_settings (empty list when valid)."""
        if not isinstance(field_settings, Mapping):
            return [
                FieldValidationError(
                    "Field settings must be a mapping",
                    values={"type": type(field_settings).__name__},
                )
            ]
        errors = [
            FieldValidationError(
                f"Setting '{name}' is unknown", target=str(name), values={"setting": name}
            )
            for name in field_settings
            if name not in self.settings_schema
        ]
        known = {k: v for k, v in field_settings.items() if k in self.settings_schema}
        for e in sorted(self._validator.iter_errors(known), key=lambda e: list(e.path)):
            target = str(e.path[0]) if e.path else None
            errors.append(
                FieldValidationError(e.message, target=target, values={"setting": target})
            )
        return errors
