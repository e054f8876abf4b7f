"""
Tests for decisor/planning/assessment.py
"""
import pytest

from decisor.planning.assessment import (
    assess_plan_risk,
    assess_plan_feasibility,
    plan_to_option,
    no_action_option,
    NO_ACTION_ID,
)


class TestPlanRisk:
    """Tests for assess_plan_risk."""

    def test_empty_plan(self, plan_factory):
        assert assess_plan_risk(plan_factory()) == 0.0

    def test_completed_steps(self, plan_factory):
        assert assess_plan_risk(plan_factory(completed=5)) == pytest.approx(0.25)

    def test_step_risk_is_capped(self, plan_factory):
        assert assess_plan_risk(plan_factory(completed=20)) == pytest.approx(0.3)

    def test_failed_steps_add_risk(self, plan_factory):
        # 3 passos: 0.15 + 1 falho: 0.1
        assert assess_plan_risk(plan_factory(completed=2, failed=1)) == pytest.approx(0.25)

    def test_duration_risk(self, plan_factory):
        six_minutes = 6 * 60 * 1000
        assert assess_plan_risk(plan_factory(completed=2, duration=six_minutes)) == pytest.approx(0.2)

    def test_duration_risk_is_capped(self, plan_factory):
        ten_hours = 10 * 60 * 60 * 1000
        assert assess_plan_risk(plan_factory(completed=2, duration=ten_hours)) == pytest.approx(0.3)

    def test_many_failures_clamp_to_one(self, plan_factory):
        assert assess_plan_risk(plan_factory(failed=1000, duration=10**12)) == 1.0


class TestPlanFeasibility:
    """Tests for assess_plan_feasibility."""

    def test_all_completed(self, plan_factory):
        assert assess_plan_feasibility(plan_factory(completed=5)) == 1.0

    def test_pending_steps_reduce(self, plan_factory):
        # 1 - 0.2 = 0.8 > 2/4
        assert assess_plan_feasibility(plan_factory(completed=2, pending=2)) == pytest.approx(0.8)

    def test_completion_ratio_raises(self, plan_factory):
        # 1 - 1.4 fica abaixo de 6/20
        assert assess_plan_feasibility(plan_factory(completed=2, pending=8)) == pytest.approx(0.2)
        assert assess_plan_feasibility(plan_factory(completed=6, pending=14)) == pytest.approx(0.3)

    def test_many_pending_clamp_to_zero(self, plan_factory):
        assert assess_plan_feasibility(plan_factory(pending=1000)) == 0.0

    def test_empty_plan(self, plan_factory):
        assert assess_plan_feasibility(plan_factory()) == 1.0

    def test_failed_steps_do_not_reduce(self, plan_factory):
        assert assess_plan_feasibility(plan_factory(failed=3)) == 1.0


class TestPlanOptions:
    """Tests for plan_to_option and no_action_option."""

    def test_plan_to_option(self, plan_factory):
        option = plan_to_option(plan_factory(completed=5, duration=0))

        assert option.id == "plan-1"
        assert option.description == "Execute plan for: Restart degraded service"
        assert option.expected_benefit == 0.7
        assert option.risk == pytest.approx(0.25)
        assert option.feasibility == 1.0
        assert option.estimated_duration == 0

    def test_no_action_option(self):
        option = no_action_option()

        assert option.id == NO_ACTION_ID
        assert option.expected_benefit == 0.0
        assert option.risk == 0.0
        assert option.feasibility == 1.0
        assert option.estimated_duration == 0
