from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..models.assumptions import FinancialAssumptions
from ..models.results import FinancialResults
from ..models.sensitivity import SensitivityResult
from ..models.settings import EngineSettings
from .discounting import calculate_irr, calculate_npv
from .payback import calculate_payback
from .projections import cumulative_cash_flows, project_cash_flows, project_revenues, steady_state_index
from .sensitivity import generate_sensitivity

logger = logging.getLogger(__name__)


class FinancialCalculator:
    def __init__(self, settings: Optional[EngineSettings] = None) -> None:
        self.settings = settings or EngineSettings()

    def run(self, assumptions: FinancialAssumptions) -> FinancialResults:
        annual_revenues = project_revenues(assumptions)
        cash_flows = project_cash_flows(annual_revenues, assumptions)
        cumulative = cumulative_cash_flows(cash_flows)

        npv = calculate_npv(cash_flows, assumptions.discount_rate / 100)
        irr = calculate_irr(
            cash_flows,
            guess=self.settings.irr_guess,
            tolerance=self.settings.irr_tolerance,
            max_iterations=self.settings.irr_max_iterations,
        )
        payback_months = calculate_payback(cash_flows)

        results = FinancialResults(
            annual_revenues=annual_revenues,
            cash_flows=cash_flows,
            cumulative_cash_flows=cumulative,
            npv=npv,
            irr=irr,
            payback_months=payback_months,
            monthly_revenue=assumptions.monthly_price * assumptions.year1_customers,
            annual_revenue=annual_revenues[0],
            total_revenue_5yr=sum(annual_revenues),
            contribution_margin=self._contribution_margin(assumptions),
        )
        logger.debug(
            "Projected %d years: npv=%.2f irr=%s payback_months=%s",
            assumptions.projection_years,
            npv,
            irr,
            payback_months,
        )
        return results

    def sensitivity(self, assumptions: FinancialAssumptions, variation_pct: Optional[float] = None) -> SensitivityResult:
        if variation_pct is None:
            variation_pct = self.settings.sensitivity_variation_pct
        return generate_sensitivity(assumptions, variation_pct)

    def _contribution_margin(self, assumptions: FinancialAssumptions) -> float:
        ramp: Sequence[float] = assumptions.margin_ramp
        return ramp[steady_state_index(assumptions.projection_years - 1, ramp)] * 100


def compute_financials(assumptions: FinancialAssumptions) -> FinancialResults:
    return FinancialCalculator().run(assumptions)
