from __future__ import annotations

import pytest

from case_finance_app.models.assumptions import DEFAULT_ASSUMPTIONS
from case_finance_app.services.projections import (
    cumulative_cash_flows,
    project_cash_flows,
    project_revenues,
    steady_state_index,
)


def test_steady_state_index_holds_last_entry():
    schedule = [0.1, 0.2, 0.3]
    assert [steady_state_index(i, schedule) for i in range(6)] == [0, 1, 2, 2, 2, 2]
    assert steady_state_index(4, [0.5]) == 0


def test_first_year_revenue_is_annualised_monthly_revenue():
    revenues = project_revenues(DEFAULT_ASSUMPTIONS)
    assert len(revenues) == DEFAULT_ASSUMPTIONS.projection_years
    assert revenues[0] == pytest.approx(630_000)


def test_growth_is_decelerated_year_over_year():
    revenues = project_revenues(DEFAULT_ASSUMPTIONS)
    expected = [630_000.0]
    for decel in [1.0, 0.7, 0.5, 0.35]:
        expected.append(expected[-1] * (1 + 0.85 * decel))
    assert revenues == pytest.approx(expected)


def test_deceleration_past_schedule_reuses_final_multiplier():
    assumptions = DEFAULT_ASSUMPTIONS.model_copy(update={"projection_years": 8, "growth_deceleration": (1.0, 0.5)})
    revenues = project_revenues(assumptions)
    assert len(revenues) == 8
    for year in range(2, 8):
        assert revenues[year] / revenues[year - 1] == pytest.approx(1 + 0.85 * 0.5)


def test_revenues_strictly_increase_under_positive_growth():
    assumptions = DEFAULT_ASSUMPTIONS.model_copy(update={"projection_years": 10, "revenue_growth_pct": 12})
    revenues = project_revenues(assumptions)
    assert all(later > earlier for earlier, later in zip(revenues, revenues[1:]))


def test_cash_flows_have_investment_at_time_zero():
    revenues = project_revenues(DEFAULT_ASSUMPTIONS)
    flows = project_cash_flows(revenues, DEFAULT_ASSUMPTIONS)
    assert len(flows) == len(revenues) + 1
    assert flows[0] == -1_800_000
    assert flows[1] == pytest.approx(630_000 * 0.15)


def test_margin_ramp_shorter_than_horizon_clamps_to_last_margin():
    assumptions = DEFAULT_ASSUMPTIONS.model_copy(update={"projection_years": 4, "margin_ramp": (0.1, 0.4)})
    revenues = project_revenues(assumptions)
    flows = project_cash_flows(revenues, assumptions)
    margins = [flow / revenue for flow, revenue in zip(flows[1:], revenues)]
    assert margins == pytest.approx([0.1, 0.4, 0.4, 0.4])


def test_single_year_projection():
    assumptions = DEFAULT_ASSUMPTIONS.model_copy(update={"projection_years": 1})
    revenues = project_revenues(assumptions)
    flows = project_cash_flows(revenues, assumptions)
    assert revenues == pytest.approx([630_000])
    assert flows == pytest.approx([-1_800_000, 94_500])


def test_cumulative_cash_flows_is_prefix_sum():
    flows = [-500.0, 120.0, -30.0, 410.0, 0.0, 75.5]
    cumulative = cumulative_cash_flows(flows)
    assert len(cumulative) == len(flows)
    for i in range(len(flows)):
        assert cumulative[i] == pytest.approx(sum(flows[: i + 1]))
    assert cumulative_cash_flows([]) == []
