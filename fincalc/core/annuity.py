"""Annuity primitives shared by the loan and growth calculators.

Every rate here is a *periodic* rate expressed as a decimal
(``0.01`` for 1% per month); :func:`monthly_rate` converts the annual
percentages the calculators receive.
"""

from __future__ import annotations

import logging

from fincalc.core.errors import DomainError

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


def monthly_rate(annual_rate_percent: float) -> float:
    return annual_rate_percent / MONTHS_PER_YEAR / 100


def fixed_payment(principal: float, periodic_rate: float, periods: int) -> float:
    """Payment that fully amortizes ``principal`` over ``periods``.

    P * r * (1 + r)^n / ((1 + r)^n - 1), or P / n when the rate is zero.
    """
    if periods <= 0:
        raise DomainError(f"periods must be positive, got {periods}")
    if periodic_rate == 0:
        logger.debug("zero rate: payment is principal / %d", periods)
        return principal / periods

    growth = (1 + periodic_rate) ** periods
    return principal * periodic_rate * growth / (growth - 1)


def annuity_factor(periodic_rate: float, periods: int) -> float:
    """Future value of one unit contributed at the start of each period.

    Annuity-due: each contribution is posted before that period's
    compounding, so ((1 + r)^n - 1) / r * (1 + r). Equals ``periods`` when
    the rate is zero.
    """
    if periods < 0:
        raise DomainError(f"periods must not be negative, got {periods}")
    if periodic_rate == 0:
        return float(periods)

    return ((1 + periodic_rate) ** periods - 1) / periodic_rate * (1 + periodic_rate)


def future_value_lump_sum(amount: float, periodic_rate: float, periods: int) -> float:
    return amount * (1 + periodic_rate) ** periods
