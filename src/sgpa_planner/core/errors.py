"""
Module: core.errors

Purpose:
    Exception hierarchy for the grading engine. Every failure the engine
    raises is one of these, so callers can tell bad input apart from an
    unknown subject code without string matching.

Key Classes:
    - EngineError: Base class
    - InvalidInputError: Marks, credits, targets or config out of domain
    - UnknownSubjectError: Target subject code not in the subject list

Used By:
    - core.models: Construction-time validation
    - engine.validation: Boundary checks before computation
    - cli: Maps errors to exit code 2

Note:
    An unreachable target is NOT an error. Planners report it through
    ``SinglePlan.possible`` / ``GlobalPlan.target_reached``.
"""

from __future__ import annotations


class EngineError(Exception):
    """Base class for grading engine errors."""


class InvalidInputError(EngineError, ValueError):
    """
    Raised when an input is outside the numeric domain of the engine.

    Attributes:
        field: Dotted path of the offending field (e.g. "subjects[1].see")
    """

    def __init__(self, message: str, field: str = ""):
        super().__init__(message)
        self.field = field


class UnknownSubjectError(EngineError, LookupError):
    """
    Raised when a subject code is not present in the subject list.

    Attributes:
        code: The code that could not be found
    """

    def __init__(self, code: str):
        super().__init__(f"Unknown subject code: {code!r}")
        self.code = code

    def __str__(self) -> str:
        # LookupError would otherwise repr() the message
        return self.args[0]
