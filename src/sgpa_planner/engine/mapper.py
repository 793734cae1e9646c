"""
Module: engine.mapper

Purpose:
    Mark-to-grade-point mapping. Pure functions, no rounding anywhere:
    fractional totals (e.g. 56.5) are kept exact so the aggregator only
    rounds once, at the final division.

Key Functions:
    - scale_see(): Raw SEE -> scaled SEE
    - calculate_total(): CIE + scaled SEE
    - gp_for_total(): Total -> grade point via the cutoff table
    - calculate_weighted_points(): gp * credits
    - grade_subject(): All of the above for one Subject

Used By:
    - engine.aggregator
    - engine.critical (tier verification)
"""

from __future__ import annotations

from sgpa_planner.core.models.results import SubjectResult
from sgpa_planner.core.models.subject import Subject

from .config import DEFAULT_GRADING_CONFIG, GradingConfig


def scale_see(see: float, config: GradingConfig = DEFAULT_GRADING_CONFIG) -> float:
    """
    Scale a raw SEE score.

    Example:
        >>> scale_see(100)
        50.0
    """
    return see * config.see_scale


def calculate_total(cie: float, see: float, config: GradingConfig = DEFAULT_GRADING_CONFIG) -> float:
    """
    Subject total: CIE plus scaled SEE.

    Example:
        >>> calculate_total(34, 45)
        56.5
    """
    return cie + scale_see(see, config)


def gp_for_total(total: float, config: GradingConfig = DEFAULT_GRADING_CONFIG) -> int:
    """
    Map a subject total to a grade point.

    Cutoffs are inclusive lower bounds scanned highest first, so a total
    exactly on a cutoff earns that tier. Totals above the top cutoff earn
    the top tier; totals below every cutoff earn ``floor_grade_point``.

    Args:
        total: Subject total
        config: Grading policy

    Returns:
        Integer grade point (non-decreasing in total)
    """
    for cutoff in config.cutoffs:
        if cutoff.cutoff_total <= total:
            return cutoff.grade_point
    return config.floor_grade_point


def calculate_weighted_points(gp: int, credits: int) -> float:
    """Grade point times credits, unrounded."""
    return gp * credits


def grade_subject(subject: Subject, config: GradingConfig = DEFAULT_GRADING_CONFIG) -> SubjectResult:
    """
    Grade one subject.

    Args:
        subject: Subject to grade (assumed already validated)
        config: Grading policy

    Returns:
        SubjectResult with total, gp and weighted points
    """
    total = calculate_total(subject.cie, subject.see, config)
    gp = gp_for_total(total, config)
    return SubjectResult(
        code=subject.code,
        total=total,
        gp=gp,
        credits=subject.credits,
        weighted=calculate_weighted_points(gp, subject.credits),
    )
