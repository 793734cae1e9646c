"""
SGPA Planner Core Package

Shared data models, errors, schema validation and serialization. Nothing
in here knows about grading policy; that lives in ``sgpa_planner.engine``.
"""

from .errors import EngineError, InvalidInputError, UnknownSubjectError
from .models import (
    Subject,
    GradeCutoff,
    SubjectResult,
    SGPAResult,
    CriticalPoint,
    SinglePlan,
    PlanStep,
    GlobalPlan,
)

__all__ = [
    "EngineError",
    "InvalidInputError",
    "UnknownSubjectError",
    "Subject",
    "GradeCutoff",
    "SubjectResult",
    "SGPAResult",
    "CriticalPoint",
    "SinglePlan",
    "PlanStep",
    "GlobalPlan",
]
