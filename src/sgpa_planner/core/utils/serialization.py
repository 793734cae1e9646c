"""
Serialization Utilities

to/from JSON helpers for the engine's records.

- Subjects are validated against the subjects schema before any model is
  built, so a bad payload fails with the path of the offending field.
- Result records are serialized through their own ``to_dict()``; nothing
  derived is recomputed here.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence

from ..errors import InvalidInputError
from ..models.subject import Subject
from ..schemas.validator import validate_subjects_payload


# ─────────────────────────────────────────────────────────────────────────────
# Subject Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_subjects(subjects: Sequence[Subject]) -> dict[str, Any]:
    """
    Serialize subjects to the ``{"subjects": [...]}`` payload shape.

    The output passes validate_subjects_payload().
    """
    return {"subjects": [s.to_dict() for s in subjects]}


def deserialize_subjects(data: Any, *, validate: bool = True) -> tuple[Subject, ...]:
    """
    Deserialize subjects from a parsed JSON payload.

    Args:
        data: A list of subject objects or ``{"subjects": [...]}``
        validate: Whether to validate against the schema first

    Returns:
        Tuple of Subject, payload order

    Raises:
        SchemaValidationError: If validate=True and data is invalid
        InvalidInputError: If a subject fails model validation
    """
    if validate:
        validate_subjects_payload(data)

    items = data.get("subjects", []) if isinstance(data, dict) else data
    subjects = []
    for i, item in enumerate(items):
        try:
            subjects.append(Subject.from_dict(item))
        except InvalidInputError as e:
            raise InvalidInputError(str(e), field=f"subjects[{i}].{e.field}".rstrip(".")) from e
    return tuple(subjects)


def load_subjects(path: Path) -> tuple[Subject, ...]:
    """
    Load and validate subjects from a JSON file.

    Args:
        path: Path to the JSON file

    Returns:
        Tuple of Subject
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return deserialize_subjects(data)


# ─────────────────────────────────────────────────────────────────────────────
# Result Serialization
# ─────────────────────────────────────────────────────────────────────────────

def to_jsonable(value: Any) -> Any:
    """
    Convert a record (or a sequence of records) to JSON-compatible data.

    Anything with ``to_dict()`` is converted through it; lists and tuples
    are converted element-wise; everything else is returned unchanged.
    """
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value


def dumps(value: Any, *, indent: int | None = 2) -> str:
    """Serialize a record (or records) to a JSON string."""
    return json.dumps(to_jsonable(value), indent=indent)
