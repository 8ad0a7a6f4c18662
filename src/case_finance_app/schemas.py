from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, confloat

from .models.assumptions import FinancialAssumptions
from .models.case import CaseAssumptions, CaseFinancials
from .models.results import FinancialResults
from .models.sensitivity import SensitivityResult


class FinancialsRequest(BaseModel):
    assumptions: CaseAssumptions = Field(default_factory=CaseAssumptions)


class FinancialsResponse(BaseModel):
    assumptions: FinancialAssumptions = Field(..., description="Assumptions after default substitution")
    results: FinancialResults
    case_financials: CaseFinancials


class SensitivityRequest(BaseModel):
    assumptions: CaseAssumptions = Field(default_factory=CaseAssumptions)
    variation_pct: Optional[confloat(gt=0, lt=100)] = Field(
        default=None, description="Tornado perturbation in percent; engine setting when omitted"
    )


class SensitivityResponse(BaseModel):
    result: SensitivityResult
