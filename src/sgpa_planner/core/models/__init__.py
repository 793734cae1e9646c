"""
Core Models Package

Immutable, validated data models passed into and out of the engine.

All models in this package are frozen dataclasses. Planners never mutate
a caller's Subject; they build hypothetical copies with ``with_see``.
"""

from .subject import Subject
from .grading import GradeCutoff
from .results import (
    SubjectResult,
    SGPAResult,
    CriticalPoint,
    SinglePlan,
    PlanStep,
    GlobalPlan,
)

__all__ = [
    "Subject",
    "GradeCutoff",
    "SubjectResult",
    "SGPAResult",
    "CriticalPoint",
    "SinglePlan",
    "PlanStep",
    "GlobalPlan",
]
