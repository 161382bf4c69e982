"""Compounding of recurring contributions, forward and inverse.

Both directions use the annuity-due convention: a period's contribution is
posted before that period's growth is applied. The SIP, goal and retirement
calculators all go through this module so their numbers cannot drift apart.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Union

from fincalc.core.annuity import (
    MONTHS_PER_YEAR,
    annuity_factor,
    future_value_lump_sum,
    monthly_rate,
)
from fincalc.core.errors import ensure_valid, money
from fincalc.schemas.growth import (
    ContributionPlan,
    GoalPlan,
    GoalResult,
    GrowthProjection,
    GrowthSnapshot,
)

logger = logging.getLogger(__name__)


def project_contributions(plan: Union[ContributionPlan, Mapping[str, Any]]) -> GrowthProjection:
    """Month-by-month forward projection, recorded once per completed year.

    contribution(m) = base * (1 + step_up)^floor((m - 1) / 12)
    balance(m)      = (balance(m - 1) + contribution(m)) * (1 + r)
    """
    plan = ensure_valid(ContributionPlan, plan)
    rate = monthly_rate(plan.annual_rate_percent)
    step_up = plan.annual_step_up_percent / 100

    balance = plan.starting_balance
    invested = 0.0
    yearly: List[GrowthSnapshot] = []
    for month in range(1, plan.horizon_years * MONTHS_PER_YEAR + 1):
        completed_years = (month - 1) // MONTHS_PER_YEAR
        contribution = plan.periodic_amount * (1 + step_up) ** completed_years
        balance = (balance + contribution) * (1 + rate)
        invested += contribution

        if month % MONTHS_PER_YEAR == 0:
            yearly.append(
                GrowthSnapshot(
                    year=month // MONTHS_PER_YEAR,
                    accumulated_value=money(balance, "accumulated_value"),
                    cumulative_contributed=money(invested, "cumulative_contributed"),
                )
            )

    # returns are measured against everything put in, including the opening lump sum
    return GrowthProjection(
        maturity_amount=money(balance, "maturity_amount"),
        invested_amount=money(invested, "invested_amount"),
        returns=money(balance - invested - plan.starting_balance, "returns"),
        yearly=yearly,
    )


def required_contribution(
    target: float,
    horizon_years: int,
    annual_rate_percent: float,
    starting_balance: float = 0.0,
) -> float:
    """Flat monthly contribution that grows to ``target`` in ``horizon_years``.

    The starting balance is compounded on its own first; only the shortfall
    left after it is funded by contributions. A goal already covered by the
    starting balance needs no contribution at all.
    """
    goal = ensure_valid(
        GoalPlan,
        {
            "target_amount": target,
            "horizon_years": horizon_years,
            "annual_rate_percent": annual_rate_percent,
            "starting_balance": starting_balance,
        },
    )
    rate = monthly_rate(goal.annual_rate_percent)
    months = goal.horizon_years * MONTHS_PER_YEAR

    shortfall = goal.target_amount - future_value_lump_sum(goal.starting_balance, rate, months)
    if shortfall <= 0:
        logger.debug("goal of %.2f already met by starting balance", target)
        return 0.0

    return shortfall / annuity_factor(rate, months)


def plan_goal(goal: Union[GoalPlan, Mapping[str, Any]]) -> GoalResult:
    """Goal planner: invert for the contribution, then project it forward."""
    goal = ensure_valid(GoalPlan, goal)
    rate = monthly_rate(goal.annual_rate_percent)
    months = goal.horizon_years * MONTHS_PER_YEAR

    contribution = required_contribution(
        goal.target_amount,
        goal.horizon_years,
        goal.annual_rate_percent,
        goal.starting_balance,
    )
    savings_value = future_value_lump_sum(goal.starting_balance, rate, months)
    yearly = project_flat_contribution(
        contribution,
        goal.horizon_years,
        goal.annual_rate_percent,
        goal.starting_balance,
    )

    total_investment = contribution * months
    return GoalResult(
        required_monthly_contribution=money(contribution, "required_monthly_contribution"),
        total_investment=money(total_investment, "total_investment"),
        returns=money(goal.target_amount - total_investment - goal.starting_balance, "returns"),
        future_value_of_savings=money(savings_value, "future_value_of_savings"),
        yearly=yearly,
    )


def project_flat_contribution(
    contribution: float,
    horizon_years: int,
    annual_rate_percent: float,
    starting_balance: float,
) -> List[GrowthSnapshot]:
    """Year series for a flat contribution, which may be zero."""
    if contribution <= 0:
        # ContributionPlan requires a positive amount; only the lump sum grows
        rate = monthly_rate(annual_rate_percent)
        return [
            GrowthSnapshot(
                year=year,
                accumulated_value=money(
                    future_value_lump_sum(starting_balance, rate, year * MONTHS_PER_YEAR),
                    "accumulated_value",
                ),
                cumulative_contributed=0.0,
            )
            for year in range(1, horizon_years + 1)
        ]

    projection = project_contributions(
        ContributionPlan(
            periodic_amount=contribution,
            annual_rate_percent=annual_rate_percent,
            horizon_years=horizon_years,
            starting_balance=starting_balance,
        )
    )
    return projection.yearly
