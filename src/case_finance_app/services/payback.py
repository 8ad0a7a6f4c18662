from __future__ import annotations

import math
from typing import Optional, Sequence

from .projections import cumulative_cash_flows


def calculate_payback(cash_flows: Sequence[float]) -> Optional[int]:
    """
    Months until cumulative cash flow turns non-negative.

    The crossover year is interpolated linearly: the unrecovered balance at the
    start of the year divided by that year's cash flow gives the fraction of the
    year needed. Returns ``None`` if the case never pays back within the horizon.
    """
    if len(cash_flows) < 2:
        return None

    cumulative = cumulative_cash_flows(cash_flows)
    for year in range(1, len(cumulative)):
        if cumulative[year] < 0:
            continue
        cash_in_year = cash_flows[year]
        if cash_in_year <= 0:
            return None
        fraction_of_year = abs(cumulative[year - 1]) / cash_in_year
        payback_years = (year - 1) + fraction_of_year
        # half-up, so 4.5 months reads as 5
        return int(math.floor(payback_years * 12 + 0.5))
    return None
