"""Schema validation utilities.

Schemas are JSON Schema documents stored as YAML under ``cfnmerge.data/schemas``
and validated with ``jsonschema``.
"""
from __future__ import annotations

from typing import Any, Dict, List

from jsonschema import Draft202012Validator

from cfnmerge.data import get_data_path, read_yaml


class SchemaValidationError(ValueError):
    """Raised when schema validation fails."""


def load_schema(schema_name: str) -> Dict[str, Any]:
    """Load a bundled schema dict.

    Automatically appends ``.yaml`` if no extension is present.

    Raises:
        FileNotFoundError: If schema file doesn't exist.
        ValueError: If schema is not a YAML mapping.
    """
    lowered = schema_name.lower()
    if not (lowered.endswith(".yaml") or lowered.endswith(".yml")):
        schema_name = f"{schema_name}.yaml"

    schema_path = get_data_path("schemas", schema_name)
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_name}")

    schema = read_yaml("schemas", schema_name)
    if not isinstance(schema, dict):
        raise ValueError(f"Schema must be a YAML mapping, got {type(schema).__name__}")
    return schema


def validate_payload(payload: Dict[str, Any], schema_name: str) -> None:
    """Validate a payload against a bundled schema.

    Raises:
        SchemaValidationError: If validation fails.
    """
    schema = load_schema(schema_name)
    errors = _collect_errors(payload, schema)
    if errors:
        raise SchemaValidationError(
            f"Validation failed against schema '{schema_name}': " + "; ".join(errors)
        )


def _collect_errors(payload: Dict[str, Any], schema: Dict[str, Any]) -> List[str]:
    validator = Draft202012Validator(schema)
    messages: List[str] = []
    for error in sorted(validator.iter_errors(payload), key=lambda e: [str(p) for p in e.path]):
        location = ".".join(str(p) for p in error.path) or "<root>"
        messages.append(f"{location}: {error.message}")
    return messages


__all__ = ["SchemaValidationError", "load_schema", "validate_payload"]
