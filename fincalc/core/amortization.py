"""Declining-balance amortization for the EMI and rent-vs-buy calculators."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Union

from fincalc.core.annuity import MONTHS_PER_YEAR, fixed_payment
from fincalc.core.errors import ensure_valid, money
from fincalc.schemas.loan import (
    AmortizationEntry,
    AmortizationYear,
    LoanSchedule,
    LoanTerms,
    YearlyLoanSchedule,
)

logger = logging.getLogger(__name__)


def build_schedule(terms: Union[LoanTerms, Mapping[str, Any]]) -> LoanSchedule:
    """Month-by-month schedule for a fixed-payment loan.

    Per period (working on unrounded values):
      1) interest = balance * monthly rate
      2) principal portion = payment - interest
      3) balance = max(balance - principal portion, 0)

    Stops, without padding, at the first period whose balance reaches 0,
    so the schedule can be shorter than ``total_months``.
    """
    terms = ensure_valid(LoanTerms, terms)
    rate = terms.monthly_rate
    payment = fixed_payment(terms.principal, rate, terms.total_months)

    balance = terms.principal
    entries: List[AmortizationEntry] = []
    for period in range(1, terms.total_months + 1):
        interest = balance * rate
        principal_portion = payment - interest
        opening = money(balance, "remaining_balance")
        balance = max(balance - principal_portion, 0.0)
        closing = money(balance, "remaining_balance")

        # principal column telescopes over rounded balances so it sums to the loan
        entries.append(
            AmortizationEntry(
                period=period,
                payment=money(payment, "payment"),
                interest=money(interest, "interest"),
                principal=money(opening - closing, "principal"),
                remaining_balance=closing,
            )
        )
        if balance <= 0:
            break

    periods_run = len(entries)
    if periods_run < terms.total_months:
        logger.debug("loan paid off at period %d of %d", periods_run, terms.total_months)

    total_paid = payment * periods_run
    return LoanSchedule(
        emi=money(payment, "emi"),
        total_paid=money(total_paid, "total_paid"),
        total_interest=money(total_paid - terms.principal, "total_interest"),
        periods_run=periods_run,
        entries=entries,
    )


def summarize_by_year(schedule: LoanSchedule) -> YearlyLoanSchedule:
    """Fold a monthly schedule into one row per (possibly partial) year."""
    years: List[AmortizationYear] = []
    for start in range(0, len(schedule.entries), MONTHS_PER_YEAR):
        block = schedule.entries[start : start + MONTHS_PER_YEAR]
        years.append(
            AmortizationYear(
                year=start // MONTHS_PER_YEAR + 1,
                payments=money(sum(entry.payment for entry in block)),
                principal_paid=money(sum(entry.principal for entry in block)),
                interest_paid=money(sum(entry.interest for entry in block)),
                closing_balance=block[-1].remaining_balance,
            )
        )

    return YearlyLoanSchedule(
        emi=schedule.emi,
        total_paid=schedule.total_paid,
        total_interest=schedule.total_interest,
        periods_run=schedule.periods_run,
        years=years,
    )
