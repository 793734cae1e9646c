"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_subjects_payload,
    validate_grading_config_payload,
    SchemaValidationError,
)

__all__ = [
    "validate_subjects_payload",
    "validate_grading_config_payload",
    "SchemaValidationError",
]
