"""Centralized mark ceilings and numeric tolerances.

Every hardcoded bound used by the grading engine lives here so the
defaults for a grading policy and the float handling in the planners can
be read (and tuned) in one place.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MarkLimits:
    """Default mark ceilings for the 10-point CIE/SEE convention."""

    max_cie: float = 50  # Continuous internal evaluation is out of 50
    max_see: float = 100  # Raw semester-end exam score is out of 100
    see_scale: float = 0.5  # SEE is halved before being added to CIE
    sgpa_places: int = 2  # SGPA is reported to two decimals


@dataclass(frozen=True)
class PlannerTolerances:
    """Float handling when critical values are turned into whole scores."""

    # (cutoff - cie) / scale can land a hair above an integer (e.g. 99.00000000001)
    ceil_epsilon: float = 1e-9


# Global instances for easy import
MARK_LIMITS = MarkLimits()
PLANNER_TOLERANCES = PlannerTolerances()
