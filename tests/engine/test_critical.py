"""
Unit tests for critical SEE values and next-tier steps.
"""

import pytest

from sgpa_planner.core.errors import InvalidInputError
from sgpa_planner.core.models import Subject
from sgpa_planner.engine.config import GradingConfig
from sgpa_planner.engine.critical import calculate_critical_see_values, next_tier_step
from sgpa_planner.engine.mapper import calculate_total, gp_for_total


def _by_cutoff(points, cutoff):
    return next(p for p in points if p.cutoff_total == cutoff)


class TestCalculateCriticalSEEValues:
    """Tests for calculate_critical_see_values."""

    def test_critical_when_cie_40_then_tier_90_needs_100(self, config):
        point = _by_cutoff(calculate_critical_see_values(40, config), 90)
        assert point.see_crit == 100
        assert point.reachable is True
        assert point.grade_point == 10

    def test_critical_when_cie_45_then_tier_90_needs_90(self, config):
        point = _by_cutoff(calculate_critical_see_values(45, config), 90)
        assert point.see_crit == 90
        assert point.reachable is True

    def test_critical_when_called_then_one_point_per_tier_in_order(self, config):
        points = calculate_critical_see_values(40, config)
        assert [p.cutoff_total for p in points] == [c.cutoff_total for c in config.cutoffs]

    def test_critical_when_cie_low_then_top_tier_unreachable(self, config):
        point = _by_cutoff(calculate_critical_see_values(30, config), 90)
        assert point.see_crit == 120
        assert point.reachable is False

    def test_critical_when_cie_clears_tier_then_negative_and_reachable(self, config):
        """Negative see_crit means CIE alone clears the tier; no clamping."""
        point = _by_cutoff(calculate_critical_see_values(45, config), 40)
        assert point.see_crit == -10
        assert point.reachable is True
        assert point.min_achievable_see == 0

    def test_critical_when_see_crit_used_then_reaches_tier(self, config):
        """cie + scaled see_crit lands exactly on the cutoff."""
        for point in calculate_critical_see_values(37, config):
            if 0 <= point.see_crit <= config.max_see:
                total = calculate_total(37, point.see_crit, config)
                assert gp_for_total(total, config) == point.grade_point

    @pytest.mark.parametrize("cie", [-1, 51, "40"])
    def test_critical_when_cie_out_of_range_then_raises_error(self, config, cie):
        with pytest.raises(InvalidInputError) as exc:
            calculate_critical_see_values(cie, config)
        assert exc.value.field == "cie"


class TestNextTierStep:
    """Tests for next_tier_step."""

    def test_next_tier_when_below_tier_then_smallest_whole_score(self, config):
        """cie 38, see 55 (total 65.5, gp 7) -> see 64 gives total 70, gp 8."""
        step = next_tier_step(Subject("S", "S", cie=38, see=55, credits=3), config)
        assert step.to_see == 64
        assert step.from_gp == 7
        assert step.to_gp == 8
        assert step.increase == 9
        assert step.weighted_gain == 3
        assert step.efficiency == pytest.approx(3 / 9)

    def test_next_tier_when_fractional_critical_then_rounds_up(self, config):
        """cie 34.3, see 40 (gp 6): tier 60 needs 51.4, so 52."""
        step = next_tier_step(Subject("S", "S", cie=34.3, see=40, credits=3), config)
        assert step.to_see == 52
        assert step.to_gp == 7

    def test_next_tier_when_top_tier_then_none(self, config):
        assert next_tier_step(Subject("S", "S", cie=45, see=90, credits=3), config) is None

    def test_next_tier_when_at_max_see_then_none(self, config):
        assert next_tier_step(Subject("S", "S", cie=20, see=100, credits=3), config) is None

    def test_next_tier_when_next_tier_unreachable_then_none(self, config):
        """cie 20, see 90 (total 65, gp 7): tier 70 needs 100, tier 80 needs 120."""
        step = next_tier_step(Subject("S", "S", cie=20, see=90, credits=3), config)
        assert step.to_see == 100
        assert next_tier_step(Subject("S", "S", cie=20, see=100, credits=3), config) is None
        assert next_tier_step(Subject("S", "S", cie=15, see=95, credits=3), config) is None

    def test_next_tier_when_equal_grade_point_tiers_then_skips_to_higher_gp(self):
        config = GradingConfig.from_table([(90, 10), (80, 9), (75, 9), (40, 4)])
        step = next_tier_step(Subject("S", "S", cie=40, see=40, credits=2), config)
        # total 60 (gp 4): the cheapest gp 9 tier is 75 -> see 70
        assert step.to_see == 70
        assert step.to_gp == 9
