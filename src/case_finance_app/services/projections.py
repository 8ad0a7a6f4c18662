from __future__ import annotations

from typing import List, Sequence

from ..models.assumptions import FinancialAssumptions


def steady_state_index(year_index: int, schedule: Sequence[float]) -> int:
    """Index into a per-year schedule, holding the final entry once the schedule runs out.

    Margin ramps and growth-deceleration schedules are usually shorter than the
    projection horizon; years past the end reuse the last value as the business's
    steady state.
    """
    return min(year_index, len(schedule) - 1)


def project_revenues(assumptions: FinancialAssumptions) -> List[float]:
    growth = assumptions.revenue_growth_pct / 100
    deceleration = assumptions.growth_deceleration
    revenues = [assumptions.monthly_price * assumptions.year1_customers * 12]
    for year_index in range(1, assumptions.projection_years):
        decel = deceleration[steady_state_index(year_index - 1, deceleration)]
        revenues.append(revenues[-1] * (1 + growth * decel))
    return revenues


def project_cash_flows(revenues: Sequence[float], assumptions: FinancialAssumptions) -> List[float]:
    ramp = assumptions.margin_ramp
    flows = [-assumptions.investment_amount]
    for year_index, revenue in enumerate(revenues):
        flows.append(revenue * ramp[steady_state_index(year_index, ramp)])
    return flows


def cumulative_cash_flows(cash_flows: Sequence[float]) -> List[float]:
    cumulative: List[float] = []
    running = 0.0
    for flow in cash_flows:
        running += flow
        cumulative.append(running)
    return cumulative
