from __future__ import annotations

from .models.assumptions import DEFAULT_ASSUMPTIONS, FinancialAssumptions
from .models.case import CaseAssumptions


def build_sample_assumptions() -> FinancialAssumptions:
    """A B2B SaaS case with a slow first year and a longer horizon than its ramp."""
    return DEFAULT_ASSUMPTIONS.model_copy(
        update={
            "monthly_price": 4200,
            "year1_customers": 22,
            "revenue_growth_pct": 60,
            "investment_amount": 2_400_000,
            "discount_rate": 12,
            "projection_years": 7,
        }
    )


def build_sample_case() -> CaseAssumptions:
    """A stored case as the wizard writes it: only the fields the user answered."""
    return CaseAssumptions(
        monthly_price=2900,
        year1_customers=40,
        revenue_growth_pct=45,
        investment_amount=950_000,
        projection_years=5,
    )
