from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class FinancialResults(BaseModel):
    annual_revenues: List[float]
    cash_flows: List[float] = Field(..., description="Index 0 is the negative upfront investment")
    cumulative_cash_flows: List[float]
    npv: float
    irr: Optional[float] = Field(None, description="Decimal rate; None when no real IRR is found")
    payback_months: Optional[int] = Field(None, description="None when the case never pays back in the horizon")
    monthly_revenue: float
    annual_revenue: float
    total_revenue_5yr: float = Field(..., description="Sum of revenue over the whole projection horizon")
    contribution_margin: float = Field(..., description="Steady-state margin in percent")
