"""
Module: engine

Purpose:
    SGPA calculation and planning. Maps marks to grade points, averages
    them by credits, and searches for the smallest exam-score increases
    that reach a target SGPA.

Key Functions:
    - calculate_sgpa(): Credit-weighted semester average
    - calculate_critical_see_values(): Minimum SEE per grade tier
    - find_minimal_see_for_target(): Single-subject planner
    - greedy_global_plan(): Multi-subject greedy planner

Key Classes:
    - GradingConfig: Grading policy (DEFAULT_GRADING_CONFIG by default)

Data flow:
    GradingConfig -> mapper -> aggregator -> {critical, single_planner,
    greedy_planner}. The planners share critical.next_tier_step and do
    not depend on each other.
"""

from .config import GradingConfig, DEFAULT_GRADING_CONFIG, load_grading_config
from .mapper import (
    scale_see,
    calculate_total,
    gp_for_total,
    calculate_weighted_points,
    grade_subject,
)
from .aggregator import calculate_sgpa, calculate_cgpa
from .critical import calculate_critical_see_values, next_tier_step, TierStep
from .single_planner import find_minimal_see_for_target
from .greedy_planner import greedy_global_plan, GreedyPlanner

__all__ = [
    "GradingConfig",
    "DEFAULT_GRADING_CONFIG",
    "load_grading_config",
    "scale_see",
    "calculate_total",
    "gp_for_total",
    "calculate_weighted_points",
    "grade_subject",
    "calculate_sgpa",
    "calculate_cgpa",
    "calculate_critical_see_values",
    "next_tier_step",
    "TierStep",
    "find_minimal_see_for_target",
    "greedy_global_plan",
    "GreedyPlanner",
]
