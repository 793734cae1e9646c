"""
Module: results

Purpose:
    Result records produced by the engine. All of them are frozen and
    built fresh per call; none is ever cached or shared.

Key Classes:
    - SubjectResult: Total / grade point / weighted points for one subject
    - SGPAResult: Per-subject breakdown plus the credit-weighted average
    - CriticalPoint: Minimum SEE for one cutoff tier at a fixed CIE
    - SinglePlan: Outcome of the single-subject planner
    - PlanStep: One score increase applied by the greedy planner
    - GlobalPlan: Outcome of the greedy planner

Dependencies:
    - dataclasses (std)
    - functools (std)

Used By:
    - engine.aggregator, engine.critical, engine.single_planner,
      engine.greedy_planner
    - core.utils.serialization / cli: JSON output
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from functools import cached_property
from typing import Any, Dict, Optional

from ..errors import InvalidInputError


@dataclass(frozen=True)
class SubjectResult:
    """
    Graded subject.

    Attributes:
        code: Subject code
        total: cie + scaled see, unrounded
        gp: Grade point for the total
        credits: Credits of the subject
        weighted: gp * credits
    """

    code: str
    total: float
    gp: int
    credits: int
    weighted: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SGPAResult:
    """
    Credit-weighted semester average.

    Attributes:
        subjects: One SubjectResult per input subject, input order
        total_credits: Sum of credits
        total_weighted: Sum of weighted points (exact)
        sgpa: total_weighted / total_credits, rounded half up to two decimals

    Invariants:
        - total_credits > 0
        - sgpa == round_half_up(total_weighted / total_credits, 2)
    """

    subjects: tuple[SubjectResult, ...]
    total_credits: int
    total_weighted: float
    sgpa: float

    def get(self, code: str) -> SubjectResult | None:
        """
        Find a subject result by code.

        Returns the first match, or None.
        """
        for result in self.subjects:
            if result.code == code:
                return result
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "subjects": [s.to_dict() for s in self.subjects],
            "total_credits": self.total_credits,
            "total_weighted": self.total_weighted,
            "sgpa": self.sgpa,
        }

    def __repr__(self) -> str:
        return f"SGPAResult(sgpa={self.sgpa}, credits={self.total_credits}, subjects={len(self.subjects)})"


@dataclass(frozen=True)
class CriticalPoint:
    """
    Minimum raw SEE needed to reach one cutoff tier.

    Attributes:
        cutoff_total: Tier lower bound
        grade_point: Grade point of the tier
        see_crit: (cutoff_total - cie) / see_scale, unclamped. Negative
            means CIE alone already clears the tier.
        reachable: see_crit <= max_see
    """

    cutoff_total: float
    grade_point: int
    see_crit: float
    reachable: bool

    @property
    def min_achievable_see(self) -> float:
        """see_crit clamped at zero."""
        return max(0.0, self.see_crit)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SinglePlan:
    """
    Smallest SEE for one subject that lifts the SGPA to a target.

    Attributes:
        code: Subject being planned
        current_see: Score the subject has now
        possible: False when even max_see does not reach the target
        min_see_to_reach_target: Smallest satisfying score (None if impossible)
        achieved_sgpa: SGPA at that score (None if impossible)
    """

    code: str
    current_see: float
    possible: bool
    min_see_to_reach_target: Optional[float] = None
    achieved_sgpa: Optional[float] = None

    @property
    def increase_see_by(self) -> Optional[float]:
        """Extra SEE marks needed, or None when impossible."""
        if self.min_see_to_reach_target is None:
            return None
        return self.min_see_to_reach_target - self.current_see

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "code": self.code,
            "current_see": self.current_see,
            "possible": self.possible,
        }
        if self.possible:
            d["min_see_to_reach_target"] = self.min_see_to_reach_target
            d["achieved_sgpa"] = self.achieved_sgpa
            d["increase_see_by"] = self.increase_see_by
        return d


@dataclass(frozen=True)
class PlanStep:
    """
    One SEE increase applied by the greedy planner.

    Invariants:
        - to_see >= from_see
        - increase_see_by == to_see - from_see
    """

    code: str
    from_see: float
    to_see: float
    increase_see_by: float

    def __post_init__(self) -> None:
        """Validate step on construction."""
        if self.to_see < self.from_see:
            raise InvalidInputError(
                f"Step for {self.code} lowers SEE: {self.from_see} -> {self.to_see}",
                field="to_see",
            )
        if self.increase_see_by != self.to_see - self.from_see:
            raise InvalidInputError(
                f"Step for {self.code} has inconsistent increase: {self.increase_see_by}",
                field="increase_see_by",
            )

    @classmethod
    def between(cls, code: str, from_see: float, to_see: float) -> PlanStep:
        """Build a step with the increase derived from the two scores."""
        return cls(code=code, from_see=from_see, to_see=to_see, increase_see_by=to_see - from_see)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class GlobalPlan:
    """
    Greedy allocation of SEE increases across all subjects.

    Attributes:
        steps: Increases in the order they were applied
        final_sgpa: SGPA after the last step (initial SGPA if no steps)
        target_reached: final_sgpa >= target_sgpa
        best_attainable_sgpa: SGPA with every SEE at max_see
        target_sgpa: The requested target
        initial_sgpa: SGPA before any step
    """

    steps: tuple[PlanStep, ...]
    final_sgpa: float
    target_reached: bool
    best_attainable_sgpa: float
    target_sgpa: float
    initial_sgpa: float

    @cached_property
    def total_increase(self) -> float:
        """Sum of SEE marks added across all steps."""
        return sum(step.increase_see_by for step in self.steps)

    def final_see_by_code(self) -> Dict[str, float]:
        """
        SEE score each planned subject ends on.

        Only subjects that appear in a step are included.
        """
        final: Dict[str, float] = {}
        for step in self.steps:
            final[step.code] = step.to_see
        return final

    def to_dict(self) -> dict[str, Any]:
        return {
            "steps": [s.to_dict() for s in self.steps],
            "final_sgpa": self.final_sgpa,
            "target_reached": self.target_reached,
            "best_attainable_sgpa": self.best_attainable_sgpa,
            "target_sgpa": self.target_sgpa,
            "initial_sgpa": self.initial_sgpa,
        }

    def __repr__(self) -> str:
        return (
            f"GlobalPlan(steps={len(self.steps)}, "
            f"sgpa={self.initial_sgpa}->{self.final_sgpa}/{self.target_sgpa}, "
            f"reached={self.target_reached})"
        )
