"""
Module: engine.critical

Purpose:
    Critical SEE values: for a fixed CIE, the minimum raw exam score
    that reaches each cutoff tier. Also the shared "next tier" lookup the
    planners use to decide what a score increase buys, so no planner
    re-derives cutoff arithmetic on its own.

Key Functions:
    - calculate_critical_see_values(): One CriticalPoint per tier
    - next_tier_step(): Smallest whole-score increase to the next grade point

Key Classes:
    - TierStep: Result of next_tier_step()

Dependencies:
    - engine.mapper: Verifies a candidate score really reaches the tier

Used By:
    - engine.greedy_planner: Candidate generation
    - cli: ``critical`` command
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from sgpa_planner.common.limits import PLANNER_TOLERANCES
from sgpa_planner.core.models.results import CriticalPoint
from sgpa_planner.core.models.subject import Subject

from .config import DEFAULT_GRADING_CONFIG, GradingConfig
from .mapper import calculate_total, gp_for_total
from .validation import validate_cie

logger = logging.getLogger(__name__)


def calculate_critical_see_values(
    cie: float,
    config: GradingConfig = DEFAULT_GRADING_CONFIG,
) -> tuple[CriticalPoint, ...]:
    """
    Minimum SEE needed for every cutoff tier at a fixed CIE.

    ``see_crit = (cutoff_total - cie) / see_scale``, left unclamped: a
    negative value means CIE alone already clears the tier and is still
    reported as reachable. Values above ``max_see`` are unreachable.

    Args:
        cie: Fixed internal marks
        config: Grading policy

    Returns:
        Tuple of CriticalPoint in the same order as ``config.cutoffs``

    Raises:
        InvalidInputError: If cie is not a number in [0, max_cie]

    Example:
        >>> points = calculate_critical_see_values(40)
        >>> points[0].see_crit, points[0].reachable
        (100.0, True)
    """
    validate_cie(cie, config)
    points = []
    for cutoff in config.cutoffs:
        see_crit = (cutoff.cutoff_total - cie) / config.see_scale
        points.append(
            CriticalPoint(
                cutoff_total=cutoff.cutoff_total,
                grade_point=cutoff.grade_point,
                see_crit=see_crit,
                reachable=see_crit <= config.max_see,
            )
        )
    return tuple(points)


@dataclass(frozen=True)
class TierStep:
    """
    Smallest whole-score move of one subject to its next grade point.

    Attributes:
        code: Subject code
        credits: Subject credits
        from_see: Current SEE
        to_see: Smallest whole SEE reaching the next grade point
        from_gp: Grade point at from_see
        to_gp: Grade point at to_see
    """

    code: str
    credits: int
    from_see: float
    to_see: float
    from_gp: int
    to_gp: int

    @property
    def increase(self) -> float:
        return self.to_see - self.from_see

    @property
    def weighted_gain(self) -> float:
        """Credit-weighted grade points gained by the move."""
        return self.credits * (self.to_gp - self.from_gp)

    @property
    def efficiency(self) -> float:
        """Weighted gain per SEE mark added."""
        return self.weighted_gain / self.increase


def next_tier_step(
    subject: Subject,
    config: GradingConfig = DEFAULT_GRADING_CONFIG,
) -> TierStep | None:
    """
    Find the cheapest SEE increase that lifts a subject one grade point tier.

    Walks the critical values from the lowest tier up and takes the first
    tier paying more than the current grade point. The critical value is
    rounded up to a whole score and checked against gp_for_total, so the
    step always agrees with what the aggregator will compute.

    Args:
        subject: Subject at its current SEE
        config: Grading policy

    Returns:
        TierStep, or None when the subject is already at its top tier, at
        max_see, or the next tier needs more than max_see
    """
    if subject.see >= config.max_see:
        return None

    current_gp = gp_for_total(calculate_total(subject.cie, subject.see, config), config)
    for point in reversed(calculate_critical_see_values(subject.cie, config)):
        if point.grade_point <= current_gp:
            continue
        if not point.reachable:
            # Higher tiers need even more SEE
            return None

        to_see = max(math.ceil(point.see_crit - PLANNER_TOLERANCES.ceil_epsilon), subject.see)
        to_see = min(to_see, config.max_see)
        to_gp = gp_for_total(calculate_total(subject.cie, to_see, config), config)
        while to_gp <= current_gp and to_see + 1 <= config.max_see:
            to_see += 1
            to_gp = gp_for_total(calculate_total(subject.cie, to_see, config), config)
        if to_gp <= current_gp:
            return None

        return TierStep(
            code=subject.code,
            credits=subject.credits,
            from_see=subject.see,
            to_see=to_see,
            from_gp=current_gp,
            to_gp=to_gp,
        )

    logger.debug(f"{subject.code} already at top tier (gp={current_gp})")
    return None
