"""
Module: engine.greedy_planner

Purpose:
    Spread SEE increases across all subjects to reach a target SGPA,
    always buying the grade point that costs the fewest exam marks per
    weighted point gained.

Key Functions:
    - greedy_global_plan(): Main entry point

Key Classes:
    - GreedyPlanner: Orchestrates the allocation loop

Algorithm:
    1. Feasibility bound: SGPA with every SEE at max_see
    2. While SGPA < target:
       a. For each subject below max_see, find its next tier step
       b. Rank by weighted gain per SEE mark, then credits, then input order
       c. Apply the best step, record it, recompute SGPA
    3. Stop when the target is met or no subject can climb a tier

    The loop always terminates: every step lifts one subject at least one
    grade point, and each subject has finitely many tiers below max_see.

Dependencies:
    - engine.critical: next_tier_step (shared with the analyzer)
    - engine.aggregator: SGPA recomputation
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from sgpa_planner.core.models.results import GlobalPlan, PlanStep
from sgpa_planner.core.models.subject import Subject

from .aggregator import _aggregate
from .config import DEFAULT_GRADING_CONFIG, GradingConfig
from .critical import TierStep, next_tier_step
from .validation import validate_subjects, validate_target

logger = logging.getLogger(__name__)


def greedy_global_plan(
    subjects: Sequence[Subject],
    target_sgpa: float,
    config: GradingConfig = DEFAULT_GRADING_CONFIG,
) -> GlobalPlan:
    """
    Plan SEE increases across all subjects to reach a target SGPA.

    The greedy loop runs even when the target is out of reach, so the
    returned steps show how far the marks can be pushed.

    Args:
        subjects: All subjects of the semester
        target_sgpa: SGPA to reach
        config: Grading policy

    Returns:
        GlobalPlan with the applied steps and the feasibility bound

    Raises:
        InvalidInputError: Invalid subjects or target

    Invariants:
        - every step has from_see <= to_see <= max_see
        - target_reached implies final_sgpa >= target_sgpa
        - best_attainable_sgpa < target_sgpa implies not target_reached

    Example:
        >>> plan = greedy_global_plan(subjects, 7.5)
        >>> plan.target_reached
        True
    """
    planner = GreedyPlanner(subjects, target_sgpa, config)
    return planner.run()


@dataclass
class GreedyPlanner:
    """
    Greedy SEE allocation orchestrator.

    Attributes:
        subjects: Caller's subjects (never mutated)
        target_sgpa: SGPA to reach
        config: Grading policy
    """

    subjects: Sequence[Subject]
    target_sgpa: float
    config: GradingConfig = DEFAULT_GRADING_CONFIG

    # Internal state
    _current: List[Subject] = field(init=False, default_factory=list)
    _steps: List[PlanStep] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        """Validate input and initialize internal state."""
        validate_subjects(self.subjects, self.config)
        validate_target(self.target_sgpa)
        self._current = list(self.subjects)
        self._steps = []

    def run(self) -> GlobalPlan:
        """
        Execute the allocation loop.

        Returns:
            GlobalPlan
        """
        self._current = list(self.subjects)
        self._steps = []

        best = self._best_attainable_sgpa()
        initial = _aggregate(self._current, self.config).sgpa
        if best < self.target_sgpa:
            logger.warning(
                f"Target SGPA {self.target_sgpa} is above the best attainable {best}; "
                f"planning as far as the marks allow"
            )

        sgpa = initial
        while sgpa < self.target_sgpa:
            picked = self._pick_step()
            if picked is None:
                logger.info("No subject can reach a higher grade point; stopping")
                break
            index, step = picked
            self._apply(index, step)
            sgpa = _aggregate(self._current, self.config).sgpa
            logger.debug(
                f"Raised {step.code} SEE {step.from_see} -> {step.to_see} "
                f"(gp {step.from_gp} -> {step.to_gp}), SGPA now {sgpa}"
            )

        plan = GlobalPlan(
            steps=tuple(self._steps),
            final_sgpa=sgpa,
            target_reached=sgpa >= self.target_sgpa,
            best_attainable_sgpa=best,
            target_sgpa=self.target_sgpa,
            initial_sgpa=initial,
        )
        logger.info(f"Greedy plan: {plan!r}")
        return plan

    # ─────────────────────────────────────────────────────────────────────────
    # Step 1: Feasibility Bound
    # ─────────────────────────────────────────────────────────────────────────

    def _best_attainable_sgpa(self) -> float:
        """SGPA with every subject's SEE at max_see."""
        maxed = [s.with_see(self.config.max_see) for s in self.subjects]
        return _aggregate(maxed, self.config).sgpa

    # ─────────────────────────────────────────────────────────────────────────
    # Step 2: Candidate Ranking
    # ─────────────────────────────────────────────────────────────────────────

    def _pick_step(self) -> Optional[Tuple[int, TierStep]]:
        """
        Best next-tier step across all subjects.

        Ranked by efficiency (weighted gain per SEE mark), then larger
        credits, then original subject order.

        Returns:
            (subject index, step), or None when no subject can climb
        """
        best_key = None
        best = None
        for i, subject in enumerate(self._current):
            if subject.see >= self.config.max_see:
                continue
            step = next_tier_step(subject, self.config)
            if step is None:
                continue
            key = (-step.efficiency, -step.credits, i)
            if best_key is None or key < best_key:
                best_key = key
                best = (i, step)
        return best

    # ─────────────────────────────────────────────────────────────────────────
    # Step 3: Apply
    # ─────────────────────────────────────────────────────────────────────────

    def _apply(self, index: int, step: TierStep) -> None:
        """Move one subject to its new SEE and record the step."""
        to_see = min(step.to_see, self.config.max_see)
        self._current[index] = self._current[index].with_see(to_see)
        self._steps.append(PlanStep.between(step.code, step.from_see, to_see))
