"""Conversions between stored investment-case records and engine types."""
from __future__ import annotations

from typing import Any, Mapping, Union

from .models.assumptions import DEFAULT_ASSUMPTIONS, FinancialAssumptions
from .models.case import CaseAssumptions, CaseFinancials
from .models.results import FinancialResults

# Fields a stored case may carry; margin_ramp and growth_deceleration are never stored.
CASE_ASSUMPTION_FIELDS = (
    "monthly_price",
    "year1_customers",
    "revenue_growth_pct",
    "gross_margin_pct",
    "discount_rate",
    "projection_years",
    "investment_amount",
)


def to_financial_assumptions(case: Union[CaseAssumptions, Mapping[str, Any]]) -> FinancialAssumptions:
    """Fill every missing or null case field from ``DEFAULT_ASSUMPTIONS``."""
    if not isinstance(case, CaseAssumptions):
        case = CaseAssumptions.model_validate(dict(case))
    overrides = {}
    for name in CASE_ASSUMPTION_FIELDS:
        value = getattr(case, name)
        if value is not None:
            overrides[name] = value
    return FinancialAssumptions(**{**DEFAULT_ASSUMPTIONS.model_dump(), **overrides})


def to_case_financials(results: FinancialResults) -> CaseFinancials:
    return CaseFinancials(
        npv=results.npv,
        irr=results.irr,
        payback_months=results.payback_months,
        annual_revenue=results.annual_revenue,
        cash_flows=list(results.cash_flows),
        total_revenue_5yr=results.total_revenue_5yr,
        contribution_margin=results.contribution_margin,
    )


def to_case_assumptions(assumptions: FinancialAssumptions) -> CaseAssumptions:
    return CaseAssumptions(**{name: getattr(assumptions, name) for name in CASE_ASSUMPTION_FIELDS})
