"""
Module: grading

Purpose:
    Provides GradeCutoff - one row of a cutoff table mapping a minimum
    subject total to a grade point.

Used By:
    - engine.config.GradingConfig
    - engine.critical: One CriticalPoint per cutoff
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..errors import InvalidInputError
from ..utils.numbers import is_number, is_whole


@dataclass(frozen=True)
class GradeCutoff:
    """
    A grade tier: totals at or above ``cutoff_total`` earn ``grade_point``.

    Attributes:
        cutoff_total: Inclusive lower bound on the subject total
        grade_point: Integer grade point for this tier
    """

    cutoff_total: float
    grade_point: int

    def __post_init__(self) -> None:
        """Validate cutoff on construction."""
        if not is_number(self.cutoff_total):
            raise InvalidInputError(
                f"cutoff_total must be a number: {self.cutoff_total!r}", field="cutoff_total"
            )
        if not is_whole(self.grade_point) or self.grade_point < 0:
            raise InvalidInputError(
                f"grade_point must be a non-negative integer: {self.grade_point!r}",
                field="grade_point",
            )
        object.__setattr__(self, "grade_point", int(self.grade_point))

    def to_dict(self) -> dict[str, Any]:
        return {"cutoff_total": self.cutoff_total, "grade_point": self.grade_point}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GradeCutoff:
        return cls(cutoff_total=data["cutoff_total"], grade_point=data["grade_point"])
