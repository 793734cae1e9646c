"""
Module: engine.aggregator

Purpose:
    Credit-weighted grade-point averages. Per-subject totals and weighted
    points stay exact; rounding to two decimals (half up, so 8.125 reads
    8.13) happens only at the final division.

Key Functions:
    - calculate_sgpa(): One semester's SGPA with per-subject breakdown
    - calculate_cgpa(): Cumulative average over several semesters

Dependencies:
    - engine.mapper: Per-subject grading
    - engine.validation: Boundary checks

Used By:
    - engine.single_planner, engine.greedy_planner
    - cli: ``sgpa`` command
"""

from __future__ import annotations

import logging
from typing import Sequence

from sgpa_planner.common.limits import MARK_LIMITS
from sgpa_planner.core.errors import InvalidInputError
from sgpa_planner.core.models.results import SGPAResult
from sgpa_planner.core.models.subject import Subject
from sgpa_planner.core.utils.numbers import round_half_up

from .config import DEFAULT_GRADING_CONFIG, GradingConfig
from .mapper import grade_subject
from .validation import validate_subjects

logger = logging.getLogger(__name__)


def calculate_sgpa(
    subjects: Sequence[Subject],
    config: GradingConfig = DEFAULT_GRADING_CONFIG,
) -> SGPAResult:
    """
    Calculate the SGPA of a set of subjects.

    Args:
        subjects: Subjects with earned marks (order is kept in the result)
        config: Grading policy

    Returns:
        SGPAResult with one SubjectResult per subject

    Raises:
        InvalidInputError: Empty input, or marks outside the config ceilings

    Example:
        >>> calculate_sgpa([Subject("A", "A", 40, 100, 4)]).sgpa
        10.0
    """
    validate_subjects(subjects, config)
    return _aggregate(subjects, config)


def _aggregate(subjects: Sequence[Subject], config: GradingConfig) -> SGPAResult:
    """calculate_sgpa without the boundary checks, for already-validated input."""
    results = tuple(grade_subject(s, config) for s in subjects)
    total_credits = sum(r.credits for r in results)
    total_weighted = sum(r.weighted for r in results)
    if total_credits <= 0:
        raise InvalidInputError("total credits must be positive", field="subjects")
    return SGPAResult(
        subjects=results,
        total_credits=total_credits,
        total_weighted=total_weighted,
        sgpa=round_half_up(total_weighted / total_credits, MARK_LIMITS.sgpa_places),
    )


def calculate_cgpa(semesters: Sequence[SGPAResult]) -> float:
    """
    Cumulative GPA across semesters.

    Uses each semester's exact weighted points and credits rather than
    its rounded SGPA, so the result matches grading every subject of every
    semester in one pass.

    Args:
        semesters: SGPAResult per semester

    Returns:
        CGPA rounded to two decimals

    Raises:
        InvalidInputError: If no semesters are given, or they carry no credits
    """
    if not semesters:
        raise InvalidInputError("semesters must not be empty", field="semesters")
    total_credits = 0
    total_weighted = 0.0
    for i, semester in enumerate(semesters):
        if not isinstance(semester, SGPAResult):
            raise InvalidInputError(
                f"semesters[{i}] is not an SGPAResult: {type(semester).__name__}",
                field=f"semesters[{i}]",
            )
        total_credits += semester.total_credits
        total_weighted += semester.total_weighted
    if total_credits <= 0:
        raise InvalidInputError("total credits must be positive", field="semesters")
    cgpa = round_half_up(total_weighted / total_credits, MARK_LIMITS.sgpa_places)
    logger.debug(f"CGPA over {len(semesters)} semesters: {cgpa} ({total_credits} credits)")
    return cgpa
