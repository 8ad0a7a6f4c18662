from __future__ import annotations

import logging
from typing import List

from ..models.assumptions import FinancialAssumptions, SensitivityKey
from ..models.sensitivity import SensitivityResult, TornadoBar
from .discounting import calculate_npv
from .projections import project_cash_flows, project_revenues

logger = logging.getLogger(__name__)

DEFAULT_VARIATION_PCT = 20.0


def pipeline_npv(assumptions: FinancialAssumptions) -> float:
    revenues = project_revenues(assumptions)
    flows = project_cash_flows(revenues, assumptions)
    return calculate_npv(flows, assumptions.discount_rate / 100)


def generate_sensitivity(
    base: FinancialAssumptions,
    variation_pct: float = DEFAULT_VARIATION_PCT,
) -> SensitivityResult:
    """
    One-at-a-time sensitivity of NPV to each scalar assumption.

    Every key is moved down and up by ``variation_pct`` percent of its base value
    while all other inputs stay at baseline, and the NPV is recomputed from scratch
    for each variant. Varying ``discount_rate`` changes the discounting itself as
    well. Bars come back sorted by spread, widest first.
    """
    base_npv = pipeline_npv(base)
    factor = variation_pct / 100

    bars: List[TornadoBar] = []
    for key in SensitivityKey:
        base_value = getattr(base, key.value)
        low_npv = pipeline_npv(base.model_copy(update={key.value: base_value * (1 - factor)}))
        high_npv = pipeline_npv(base.model_copy(update={key.value: base_value * (1 + factor)}))
        bars.append(
            TornadoBar(
                assumption_key=key,
                label=key.label,
                base_npv=base_npv,
                low_npv=low_npv,
                high_npv=high_npv,
                low_delta=low_npv - base_npv,
                high_delta=high_npv - base_npv,
                spread=abs(high_npv - low_npv),
            )
        )

    bars.sort(key=lambda bar: bar.spread, reverse=True)
    logger.debug("Sensitivity at +/-%s%%: widest bar %s (spread %.2f)", variation_pct, bars[0].assumption_key.value, bars[0].spread)
    return SensitivityResult(base_npv=base_npv, variation_pct=variation_pct, bars=bars)
