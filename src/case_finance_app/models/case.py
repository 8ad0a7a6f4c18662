from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class CaseAssumptions(BaseModel):
    """Assumptions as stored on an investment case. Any field may be missing."""

    model_config = ConfigDict(extra="allow")

    monthly_price: Optional[float] = None
    year1_customers: Optional[float] = None
    revenue_growth_pct: Optional[float] = None
    gross_margin_pct: Optional[float] = None
    discount_rate: Optional[float] = None
    projection_years: Optional[int] = None
    investment_amount: Optional[float] = None


class CaseFinancials(BaseModel):
    npv: Optional[float] = None
    irr: Optional[float] = None
    payback_months: Optional[int] = None
    annual_revenue: Optional[float] = None
    cash_flows: Optional[List[float]] = None
    total_revenue_5yr: Optional[float] = None
    contribution_margin: Optional[float] = None
