"""Retirement corpus planning on top of the growth projector."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Union

from fincalc.core.annuity import MONTHS_PER_YEAR, future_value_lump_sum, monthly_rate
from fincalc.core.errors import ensure_valid, money
from fincalc.core.growth import project_flat_contribution, required_contribution
from fincalc.schemas.retirement import RetirementInputs, RetirementPlan, RetirementYear

logger = logging.getLogger(__name__)

# corpus must cover this many years of the first retirement year's expenses
CORPUS_MULTIPLE = 25


def plan_retirement(inputs: Union[RetirementInputs, Mapping[str, Any]]) -> RetirementPlan:
    """
    Steps:
      1) Monthly expense today = salary / 12 * expense ratio.
      2) Inflate it to the retirement age.
      3) Required corpus = 25 x the annual expense at retirement.
      4) Goal-seek the monthly contribution, net of what current savings
         grow to on their own.
      5) Project that contribution forward for the year-by-year chart.
    """
    inputs = ensure_valid(RetirementInputs, inputs)
    years = inputs.years_to_retirement
    months = years * MONTHS_PER_YEAR
    rate = monthly_rate(inputs.expected_return_percent)

    expense_today = inputs.annual_salary / MONTHS_PER_YEAR * inputs.expense_ratio
    expense_at_retirement = expense_today * (1 + inputs.inflation_percent / 100) ** years
    required_corpus = expense_at_retirement * MONTHS_PER_YEAR * CORPUS_MULTIPLE

    savings_value = future_value_lump_sum(inputs.current_savings, rate, months)
    shortfall = max(required_corpus - savings_value, 0.0)
    contribution = required_contribution(
        required_corpus,
        years,
        inputs.expected_return_percent,
        inputs.current_savings,
    )
    logger.debug(
        "retirement in %d years: corpus %.2f, monthly contribution %.2f",
        years,
        required_corpus,
        contribution,
    )

    snapshots = project_flat_contribution(
        contribution,
        years,
        inputs.expected_return_percent,
        inputs.current_savings,
    )
    required_corpus_rounded = money(required_corpus, "required_corpus")
    yearly: List[RetirementYear] = [
        RetirementYear(
            year=snapshot.year,
            projected_corpus=snapshot.accumulated_value,
            required_corpus=required_corpus_rounded,
        )
        for snapshot in snapshots
    ]

    return RetirementPlan(
        years_to_retirement=years,
        monthly_expense_today=money(expense_today, "monthly_expense_today"),
        monthly_expense_at_retirement=money(expense_at_retirement, "monthly_expense_at_retirement"),
        required_corpus=required_corpus_rounded,
        future_value_of_savings=money(savings_value, "future_value_of_savings"),
        covered_by_savings=money(min(savings_value, required_corpus), "covered_by_savings"),
        corpus_shortfall=money(shortfall, "corpus_shortfall"),
        monthly_contribution_needed=money(contribution, "monthly_contribution_needed"),
        total_investment_needed=money(
            contribution * months + inputs.current_savings,
            "total_investment_needed",
        ),
        yearly=yearly,
    )
