"""
Module: engine.single_planner

Purpose:
    Smallest SEE for ONE subject that lifts the semester SGPA to a target,
    holding every other subject at its current score.

Key Functions:
    - find_minimal_see_for_target(): Main entry point

Algorithm:
    Candidate scores are the whole scores from the current SEE (rounded up)
    to max_see. SGPA never decreases as one SEE rises (grade points only
    step up), so the candidates are binary searched for the first one whose
    SGPA meets the target.

Dependencies:
    - engine.aggregator: SGPA of each hypothetical subject set
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence

from sgpa_planner.core.errors import UnknownSubjectError
from sgpa_planner.core.models.results import SinglePlan
from sgpa_planner.core.models.subject import Subject

from .aggregator import _aggregate
from .config import DEFAULT_GRADING_CONFIG, GradingConfig
from .validation import validate_subjects, validate_target

logger = logging.getLogger(__name__)


def find_minimal_see_for_target(
    subjects: Sequence[Subject],
    target_code: str,
    target_sgpa: float,
    config: GradingConfig = DEFAULT_GRADING_CONFIG,
) -> SinglePlan:
    """
    Find the smallest SEE for ``target_code`` that reaches ``target_sgpa``.

    The policy never recommends lowering a score: the search starts at
    the subject's current SEE.

    Args:
        subjects: All subjects of the semester
        target_code: Code of the subject whose SEE may change
        target_sgpa: SGPA to reach
        config: Grading policy

    Returns:
        SinglePlan. ``min_see_to_reach_target`` is a whole score, so a
        fractional current SEE that already meets the target is reported
        rounded up. ``possible`` is False (and the optional fields None)
        when even max_see does not reach the target.

    Raises:
        InvalidInputError: Invalid subjects or target
        UnknownSubjectError: target_code not among subjects

    Example:
        >>> subjects = [Subject("A", "A", 45, 50, 4), Subject("B", "B", 40, 60, 3)]
        >>> plan = find_minimal_see_for_target(subjects, "A", 8.5)
        >>> plan.possible, plan.min_see_to_reach_target
        (True, 70)
    """
    validate_subjects(subjects, config)
    validate_target(target_sgpa)
    index = _index_of(subjects, target_code)
    subject = subjects[index]

    candidates = _candidate_scores(subject.see, config.max_see)

    def sgpa_at(see: float) -> float:
        trial = list(subjects)
        trial[index] = subject.with_see(see)
        return _aggregate(trial, config).sgpa

    # Binary search for the first candidate meeting the target
    lo, hi = 0, len(candidates)
    while lo < hi:
        mid = (lo + hi) // 2
        if sgpa_at(candidates[mid]) >= target_sgpa:
            hi = mid
        else:
            lo = mid + 1

    if lo == len(candidates):
        logger.info(
            f"{target_code}: target SGPA {target_sgpa} unreachable "
            f"(SGPA at max_see is {sgpa_at(candidates[-1])})"
        )
        return SinglePlan(code=target_code, current_see=subject.see, possible=False)

    min_see = candidates[lo]
    achieved = sgpa_at(min_see)
    logger.debug(f"{target_code}: SEE {subject.see} -> {min_see} gives SGPA {achieved}")
    return SinglePlan(
        code=target_code,
        current_see=subject.see,
        possible=True,
        min_see_to_reach_target=min_see,
        achieved_sgpa=achieved,
    )


def _index_of(subjects: Sequence[Subject], code: str) -> int:
    """Position of the first subject with this code."""
    for i, subject in enumerate(subjects):
        if subject.code == code:
            return i
    raise UnknownSubjectError(code)


def _candidate_scores(current_see: float, max_see: float) -> List[float]:
    """Whole scores from ceil(current_see) to max_see."""
    scores: List[float] = list(range(math.ceil(current_see), math.floor(max_see) + 1))
    # Fractional max_see with no whole score left above current_see
    return scores or [current_see]
