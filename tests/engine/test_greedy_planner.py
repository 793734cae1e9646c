"""
Unit tests for the global greedy planner.
"""

import logging

import pytest

from sgpa_planner.core.errors import InvalidInputError
from sgpa_planner.core.models import Subject
from sgpa_planner.engine.aggregator import calculate_sgpa
from sgpa_planner.engine.greedy_planner import GreedyPlanner, greedy_global_plan


def _apply_steps(subjects, plan):
    final = plan.final_see_by_code()
    return [s.with_see(final[s.code]) if s.code in final else s for s in subjects]


def _assert_step_invariants(plan, config):
    for step in plan.steps:
        assert step.to_see >= step.from_see
        assert step.increase_see_by == step.to_see - step.from_see
        assert step.to_see <= config.max_see


class TestGreedyGlobalPlan:
    """Tests for greedy_global_plan."""

    def test_plan_when_reachable_then_meets_target(self, improvable_subjects, config):
        plan = greedy_global_plan(improvable_subjects, 7.5, config)

        assert plan.initial_sgpa == 7.3
        assert plan.best_attainable_sgpa == 9.3
        assert plan.target_reached is True
        assert plan.final_sgpa >= 7.5
        _assert_step_invariants(plan, config)

    def test_plan_when_one_step_enough_then_most_efficient_subject(self, improvable_subjects, config):
        """SUB2 gains 3 weighted points for 9 marks, beating SUB1 (4 for 20) and SUB3 (3 for 16)."""
        plan = greedy_global_plan(improvable_subjects, 7.5, config)

        assert len(plan.steps) == 1
        step = plan.steps[0]
        assert (step.code, step.from_see, step.to_see, step.increase_see_by) == ("SUB2", 55, 64, 9)
        assert plan.final_sgpa == 7.6

    def test_plan_when_steps_replayed_then_final_sgpa_matches(self, improvable_subjects, config):
        plan = greedy_global_plan(improvable_subjects, 9.0, config)
        replayed = calculate_sgpa(_apply_steps(improvable_subjects, plan), config)
        assert replayed.sgpa == plan.final_sgpa
        assert plan.target_reached is True

    def test_plan_when_target_already_met_then_no_steps(self, three_subjects, config):
        plan = greedy_global_plan(three_subjects, 8.0, config)
        assert plan.steps == ()
        assert plan.final_sgpa == plan.initial_sgpa == 8.8
        assert plan.target_reached is True

    def test_plan_when_unreachable_then_not_reached(self, low_cie_subjects, config):
        plan = greedy_global_plan(low_cie_subjects, 10.0, config)

        assert plan.best_attainable_sgpa == 8.0
        assert plan.best_attainable_sgpa < 10.0
        assert plan.target_reached is False
        _assert_step_invariants(plan, config)

    def test_plan_when_unreachable_then_still_climbs_to_bound(self, low_cie_subjects, config):
        """The loop keeps going for observability and ends on the bound."""
        plan = greedy_global_plan(low_cie_subjects, 10.0, config)
        assert len(plan.steps) > 0
        assert plan.final_sgpa == plan.best_attainable_sgpa

    def test_plan_when_unreachable_then_logs_warning(self, low_cie_subjects, config, caplog):
        with caplog.at_level(logging.WARNING, logger="sgpa_planner.engine.greedy_planner"):
            greedy_global_plan(low_cie_subjects, 10.0, config)
        assert "above the best attainable" in caplog.text

    def test_plan_when_full_tie_then_input_order_first(self, config):
        """All three tie on efficiency and credits; input order decides."""
        subjects = [
            Subject("A", "A", cie=40, see=50, credits=2),  # total 65 -> 70 needs +10, gain 2 -> 0.2
            Subject("B", "B", cie=40, see=50, credits=2),
            Subject("C", "C", cie=40, see=50, credits=2),
        ]
        plan = greedy_global_plan(subjects, 7.2, config)
        assert plan.steps[0].code == "A"

    def test_plan_when_ties_on_efficiency_then_credits_break_tie(self, config):
        subjects = [
            Subject("A", "A", cie=40, see=50, credits=2),  # +10 marks for 2 points -> 0.2
            Subject("B", "B", cie=40, see=40, credits=4),  # total 60 -> 70 needs +20 for 4 points -> 0.2
        ]
        plan = greedy_global_plan(subjects, 7.4, config)
        assert plan.steps[0].code == "B"

    def test_plan_when_called_then_inputs_untouched(self, improvable_subjects, config):
        before = list(improvable_subjects)
        greedy_global_plan(improvable_subjects, 9.3, config)
        assert improvable_subjects == before

    def test_plan_when_called_twice_then_identical(self, improvable_subjects, config):
        assert greedy_global_plan(improvable_subjects, 8.5, config) == greedy_global_plan(
            improvable_subjects, 8.5, config
        )

    @pytest.mark.parametrize("target", [7.0, 7.8, 8.3, 8.9, 9.3, 9.31])
    def test_plan_when_various_targets_then_invariants_hold(self, improvable_subjects, config, target):
        plan = greedy_global_plan(improvable_subjects, target, config)
        _assert_step_invariants(plan, config)
        if plan.best_attainable_sgpa < target:
            assert plan.target_reached is False
        if plan.target_reached:
            assert plan.final_sgpa >= target
        assert plan.final_sgpa <= plan.best_attainable_sgpa

    def test_plan_when_sgpa_lands_on_half_then_target_met(self, config):
        subjects = [
            Subject("A", "A", cie=50, see=100, credits=3),
            Subject("B", "B", cie=40, see=40, credits=5),
        ]
        plan = greedy_global_plan(subjects, 8.13, config)
        assert plan.initial_sgpa == 8.13
        assert plan.steps == ()
        assert plan.target_reached is True

    def test_plan_when_bad_target_then_raises_error(self, improvable_subjects, config):
        with pytest.raises(InvalidInputError):
            greedy_global_plan(improvable_subjects, "8.0", config)  # type: ignore


class TestGreedyPlanner:
    """Tests for the GreedyPlanner orchestrator."""

    def test_run_when_called_twice_then_state_reset(self, improvable_subjects, config):
        planner = GreedyPlanner(improvable_subjects, 8.5, config)
        assert planner.run() == planner.run()

    def test_init_when_invalid_subjects_then_raises_error(self, config):
        with pytest.raises(InvalidInputError):
            GreedyPlanner([], 8.0, config)
