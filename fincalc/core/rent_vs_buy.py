"""Cumulative cost of buying with a loan versus renting, year by year."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

from fincalc.core.amortization import build_schedule
from fincalc.core.annuity import MONTHS_PER_YEAR, fixed_payment
from fincalc.core.errors import ensure_valid, money
from fincalc.schemas.loan import LoanTerms
from fincalc.schemas.rent_vs_buy import CostYear, RentVsBuyInputs, RentVsBuyResult

logger = logging.getLogger(__name__)


def compare_rent_vs_buy(inputs: Union[RentVsBuyInputs, Mapping[str, Any]]) -> RentVsBuyResult:
    """
    Buy path: down payment plus every EMI paid so far; EMIs stop once the
    loan is repaid, even when the horizon runs longer.
    Rent path: rent for year y is rent_0 * (1 + increase)^(y - 1), paid 12 times.
    The cheaper path at the horizon is recommended (a tie recommends buying).
    """
    inputs = ensure_valid(RentVsBuyInputs, inputs)
    loan_amount = inputs.loan_amount

    if loan_amount > 0:
        terms = LoanTerms(
            principal=loan_amount,
            annual_rate_percent=inputs.loan_rate_percent,
            tenure_years=inputs.loan_tenure_years,
        )
        emi = fixed_payment(loan_amount, terms.monthly_rate, terms.total_months)
        months_of_payments = build_schedule(terms).periods_run
    else:
        logger.debug("home bought outright, buy path costs only the down payment")
        emi = 0.0
        months_of_payments = 0

    rent_growth = 1 + inputs.annual_rent_increase_percent / 100
    cumulative_rent = 0.0
    current_rent = inputs.monthly_rent

    yearly: List[CostYear] = []
    break_even_year: Optional[int] = None
    for year in range(1, inputs.horizon_years + 1):
        months_paid = min(year * MONTHS_PER_YEAR, months_of_payments)
        cumulative_buy = inputs.down_payment + emi * months_paid

        cumulative_rent += current_rent * MONTHS_PER_YEAR
        current_rent *= rent_growth

        if break_even_year is None and cumulative_rent >= cumulative_buy:
            break_even_year = year

        yearly.append(
            CostYear(
                year=year,
                cumulative_buy_cost=money(cumulative_buy, "cumulative_buy_cost"),
                cumulative_rent_cost=money(cumulative_rent, "cumulative_rent_cost"),
            )
        )

    final_buy = inputs.down_payment + emi * min(inputs.horizon_years * MONTHS_PER_YEAR, months_of_payments)
    final_rent = cumulative_rent
    recommendation = "rent" if final_rent < final_buy else "buy"

    return RentVsBuyResult(
        loan_amount=money(loan_amount, "loan_amount"),
        emi=money(emi, "emi"),
        yearly=yearly,
        total_buy_cost=money(final_buy, "total_buy_cost"),
        total_rent_cost=money(final_rent, "total_rent_cost"),
        recommendation=recommendation,
        savings=money(abs(final_buy - final_rent), "savings"),
        break_even_year=break_even_year,
    )
