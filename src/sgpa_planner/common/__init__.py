"""Common constants shared across the planner."""

from __future__ import annotations

from .limits import (
    MarkLimits,
    PlannerTolerances,
    MARK_LIMITS,
    PLANNER_TOLERANCES,
)

__all__ = [
    "MarkLimits",
    "PlannerTolerances",
    "MARK_LIMITS",
    "PLANNER_TOLERANCES",
]
