"""Present-value math: NPV and a Newton-Raphson IRR solver."""
from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

# Below this |f'(r)| the Newton step is not taken; the rate is nudged instead.
MIN_DERIVATIVE = 1e-12
DERIVATIVE_NUDGE = 0.01
# A step landing at or below RATE_FLOOR is pulled back to MIN_RATE_CLAMP, away from r = -1.
RATE_FLOOR = -0.99
MIN_RATE_CLAMP = -0.5

DEFAULT_IRR_GUESS = 0.1
DEFAULT_IRR_TOLERANCE = 1e-7
DEFAULT_IRR_MAX_ITERATIONS = 100


def calculate_npv(cash_flows: Sequence[float], rate: float) -> float:
    """Discount ``cash_flows`` at ``rate`` (decimal). ``cash_flows[0]`` sits at t=0 and is not discounted."""
    return sum(flow / (1 + rate) ** period for period, flow in enumerate(cash_flows))


def _has_sign_change(cash_flows: Sequence[float]) -> bool:
    has_positive = False
    has_negative = False
    for flow in cash_flows:
        if flow > 0:
            has_positive = True
        elif flow < 0:
            has_negative = True
        if has_positive and has_negative:
            return True
    return False


def _npv_with_derivative(cash_flows: Sequence[float], rate: float) -> Tuple[float, float]:
    value = 0.0
    derivative = 0.0
    for period, flow in enumerate(cash_flows):
        value += flow / (1 + rate) ** period
        if period > 0:
            derivative += -period * flow / (1 + rate) ** (period + 1)
    return value, derivative


def calculate_irr(
    cash_flows: Sequence[float],
    guess: float = DEFAULT_IRR_GUESS,
    tolerance: float = DEFAULT_IRR_TOLERANCE,
    max_iterations: int = DEFAULT_IRR_MAX_ITERATIONS,
) -> Optional[float]:
    """
    Internal rate of return as a decimal (0.284 for 28.4%).

    Solves NPV(r) = 0 by Newton-Raphson on

        f(r)  = sum(CF_i / (1 + r)^i)
        f'(r) = sum(-i * CF_i / (1 + r)^(i + 1))

    Returns ``None`` when no IRR exists (fewer than two flows or no sign change)
    or when the iteration does not converge within ``max_iterations``.
    """
    if len(cash_flows) < 2 or not _has_sign_change(cash_flows):
        return None

    rate = guess
    for _ in range(max_iterations):
        try:
            value, derivative = _npv_with_derivative(cash_flows, rate)
        except (OverflowError, ZeroDivisionError):
            logger.debug("IRR iteration left the representable range at rate %r", rate)
            return None

        if abs(derivative) < MIN_DERIVATIVE:
            rate += DERIVATIVE_NUDGE
            continue

        delta = value / derivative
        rate -= delta
        if rate <= RATE_FLOOR:
            rate = MIN_RATE_CLAMP

        if abs(delta) < tolerance:
            return rate

    logger.debug("IRR did not converge after %d iterations (last rate %.6f)", max_iterations, rate)
    return None
