"""
Schema Validation Utilities

Validates JSON payloads (subject lists and grading configs) before they
are turned into models.

Basic structural checks run first and give short, field-specific
messages; full JSON Schema validation (``jsonschema``) runs afterwards and
catches anything the basic checks do not describe. Either way the failure
is a SchemaValidationError carrying the dotted path of the bad field.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from ..errors import InvalidInputError


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class SchemaValidationError(InvalidInputError):
    """Raised when a payload fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message, field=path)
        self.path = path
        self.errors = errors or []


def _run_jsonschema(data: Any, schema_name: str) -> None:
    schema = _load_schema(schema_name)
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        raise SchemaValidationError(
            f"Schema validation failed: {e.message}",
            path=".".join(str(p) for p in e.absolute_path),
            errors=[e.message],
        ) from e


def validate_subjects_payload(data: Any) -> None:
    """
    Validate a subjects payload.

    Accepts either a bare list of subject objects or ``{"subjects": [...]}``.

    Args:
        data: Parsed JSON

    Raises:
        SchemaValidationError: If data is invalid
    """
    subjects = data.get("subjects") if isinstance(data, dict) else data
    if not isinstance(subjects, list):
        raise SchemaValidationError("subjects must be a list", path="subjects")
    if not subjects:
        raise SchemaValidationError("subjects must not be empty", path="subjects")

    required = ["code", "cie", "see", "credits"]
    for i, item in enumerate(subjects):
        if not isinstance(item, dict):
            raise SchemaValidationError(f"Subject {i} must be an object", path=f"subjects[{i}]")
        missing = [f for f in required if f not in item]
        if missing:
            raise SchemaValidationError(
                f"Subject {i} missing required fields: {missing}",
                path=f"subjects[{i}]",
                errors=[f"Missing field: {f}" for f in missing],
            )

    _run_jsonschema(data, "subjects")


def validate_grading_config_payload(data: Any) -> None:
    """
    Validate a grading config payload.

    Only the shape is checked here. Ordering rules on the cutoff table
    are enforced by GradingConfig itself.

    Args:
        data: Parsed JSON

    Raises:
        SchemaValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise SchemaValidationError("Grading config must be an object")
    if "cutoffs" not in data:
        raise SchemaValidationError(
            "Grading config missing required field: cutoffs",
            path="cutoffs",
            errors=["Missing field: cutoffs"],
        )

    _run_jsonschema(data, "grading_config")
