from __future__ import annotations

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, conint


class SensitivityKey(str, Enum):
    MONTHLY_PRICE = "monthly_price"
    YEAR1_CUSTOMERS = "year1_customers"
    REVENUE_GROWTH_PCT = "revenue_growth_pct"
    GROSS_MARGIN_PCT = "gross_margin_pct"
    INVESTMENT_AMOUNT = "investment_amount"
    DISCOUNT_RATE = "discount_rate"

    @property
    def label(self) -> str:
        return _SENSITIVITY_LABELS[self]


_SENSITIVITY_LABELS = {
    SensitivityKey.MONTHLY_PRICE: "Monthly Price",
    SensitivityKey.YEAR1_CUSTOMERS: "Year 1 Customers",
    SensitivityKey.REVENUE_GROWTH_PCT: "Revenue Growth %",
    SensitivityKey.GROSS_MARGIN_PCT: "Gross Margin %",
    SensitivityKey.INVESTMENT_AMOUNT: "Investment Amount",
    SensitivityKey.DISCOUNT_RATE: "Discount Rate",
}


class FinancialAssumptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    monthly_price: float
    year1_customers: float
    revenue_growth_pct: float = Field(..., description="Nominal YoY growth in percent (85 = 85%)")
    gross_margin_pct: float = Field(..., description="Informational; cash flows use margin_ramp")
    investment_amount: float = Field(..., description="Upfront outlay, booked negative at t=0")
    discount_rate: float = Field(..., description="Annual discount rate in percent (10 = 10%)")
    projection_years: conint(ge=1)
    margin_ramp: Tuple[float, ...] = Field(..., min_length=1, description="Net margin per year; last entry repeats")
    growth_deceleration: Tuple[float, ...] = Field(
        ..., min_length=1, description="Multiplier on nominal growth per year after year 1; last entry repeats"
    )


DEFAULT_ASSUMPTIONS = FinancialAssumptions(
    monthly_price=3500,
    year1_customers=15,
    revenue_growth_pct=85,
    gross_margin_pct=78,
    investment_amount=1_800_000,
    discount_rate=10,
    projection_years=5,
    margin_ramp=(0.15, 0.35, 0.52, 0.6, 0.65),
    growth_deceleration=(1.0, 0.7, 0.5, 0.35),
)
