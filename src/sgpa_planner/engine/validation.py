"""
Module: engine.validation

Purpose:
    Boundary checks run at the top of every public engine function, before
    any computation. Subject construction already rules out negative marks
    and bad credits; the checks here add the config-dependent ceilings and
    the collection-level rules.

Key Functions:
    - validate_subjects(): Non-empty, Subject instances, marks within ceilings
    - validate_cie(): One CIE value within [0, max_cie]
    - validate_target(): Target SGPA is a non-negative number
"""

from __future__ import annotations

from typing import Any, Sequence

from sgpa_planner.core.errors import InvalidInputError
from sgpa_planner.core.models.subject import Subject
from sgpa_planner.core.utils.numbers import is_number

from .config import GradingConfig


def validate_subjects(subjects: Sequence[Subject], config: GradingConfig) -> None:
    """
    Check a subject sequence against the grading config.

    Raises:
        InvalidInputError: Empty sequence, non-Subject item, or a mark
            above its ceiling. ``field`` names the offending subject.
    """
    if isinstance(subjects, (str, bytes)) or not isinstance(subjects, Sequence):
        raise InvalidInputError("subjects must be a sequence of Subject", field="subjects")
    if len(subjects) == 0:
        raise InvalidInputError("subjects must not be empty", field="subjects")

    for i, subject in enumerate(subjects):
        if not isinstance(subject, Subject):
            raise InvalidInputError(
                f"subjects[{i}] is not a Subject: {type(subject).__name__}",
                field=f"subjects[{i}]",
            )
        if subject.cie > config.max_cie:
            raise InvalidInputError(
                f"{subject.code}: cie {subject.cie} exceeds max_cie {config.max_cie}",
                field=f"subjects[{i}].cie",
            )
        if subject.see > config.max_see:
            raise InvalidInputError(
                f"{subject.code}: see {subject.see} exceeds max_see {config.max_see}",
                field=f"subjects[{i}].see",
            )


def validate_cie(cie: Any, config: GradingConfig) -> None:
    """Check a single CIE value is a number in [0, max_cie]."""
    if not is_number(cie):
        raise InvalidInputError(f"cie must be a number: {cie!r}", field="cie")
    if not 0 <= cie <= config.max_cie:
        raise InvalidInputError(f"cie {cie} outside [0, {config.max_cie}]", field="cie")


def validate_target(target_sgpa: Any) -> None:
    """Check the target SGPA is a non-negative number."""
    if not is_number(target_sgpa):
        raise InvalidInputError(f"target_sgpa must be a number: {target_sgpa!r}", field="target_sgpa")
    if target_sgpa < 0:
        raise InvalidInputError(f"target_sgpa cannot be negative: {target_sgpa}", field="target_sgpa")
