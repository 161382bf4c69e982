from __future__ import annotations

from math import isclose

import pytest

from fincalc.core.errors import ValidationError
from fincalc.core.growth import plan_goal, project_contributions, required_contribution
from fincalc.schemas.growth import ContributionPlan, GoalPlan


def test_sip_reference_maturity():
    projection = project_contributions(
        ContributionPlan(periodic_amount=10_000, annual_rate_percent=12, horizon_years=10)
    )

    assert isclose(projection.maturity_amount, 2_323_391, abs_tol=1.0)
    assert projection.invested_amount == 1_200_000
    assert isclose(projection.returns, projection.maturity_amount - 1_200_000, abs_tol=0.01)


def test_yearly_snapshots_are_contiguous_and_non_decreasing():
    projection = project_contributions(
        {"periodic_amount": 5_000, "annual_rate_percent": 9, "horizon_years": 7, "annual_step_up_percent": 5}
    )
    values = [row.accumulated_value for row in projection.yearly]
    invested = [row.cumulative_contributed for row in projection.yearly]

    assert [row.year for row in projection.yearly] == list(range(1, 8))
    assert values == sorted(values)
    assert invested == sorted(invested)
    assert projection.yearly[-1].accumulated_value == projection.maturity_amount


def test_step_up_applies_to_contribution_once_per_year():
    projection = project_contributions(
        {"periodic_amount": 1_000, "annual_rate_percent": 0, "horizon_years": 2, "annual_step_up_percent": 10}
    )

    assert projection.yearly[0].cumulative_contributed == 12_000
    assert isclose(projection.invested_amount, 12_000 + 12 * 1_100, abs_tol=0.01)
    # with no growth the balance is exactly what went in
    assert projection.maturity_amount == projection.invested_amount
    assert projection.returns == 0


def test_starting_balance_is_not_counted_as_returns():
    projection = project_contributions(
        {"periodic_amount": 100, "annual_rate_percent": 0, "horizon_years": 1, "starting_balance": 5_000}
    )

    assert projection.maturity_amount == 6_200
    assert projection.invested_amount == 1_200
    assert projection.returns == 0


def test_goal_reference_contribution_matches_annuity_inversion():
    result = plan_goal(GoalPlan(target_amount=5_000_000, horizon_years=15, annual_rate_percent=10))

    rate = 10 / 12 / 100
    factor = ((1 + rate) ** 180 - 1) / rate * (1 + rate)
    assert isclose(result.required_monthly_contribution, 5_000_000 / factor, abs_tol=0.01)
    assert 11_900 < result.required_monthly_contribution < 12_100
    assert len(result.yearly) == 15


@pytest.mark.parametrize(
    "target, years, rate",
    [(5_000_000, 15, 10), (250_000, 3, 7.5), (10_000_000, 30, 14), (90_000, 2, 0)],
)
def test_inverse_then_forward_reaches_target(target, years, rate):
    contribution = required_contribution(target, years, rate)
    projection = project_contributions(
        ContributionPlan(periodic_amount=contribution, annual_rate_percent=rate, horizon_years=years)
    )

    assert isclose(projection.maturity_amount, target, rel_tol=1e-3)


def test_zero_rate_goal_divides_evenly():
    assert isclose(required_contribution(12_000, 1, 0), 1_000)


def test_goal_already_met_by_savings_needs_nothing():
    assert required_contribution(1_000, 5, 10, starting_balance=10_000) == 0

    result = plan_goal(
        {"target_amount": 1_000, "horizon_years": 5, "annual_rate_percent": 10, "starting_balance": 10_000}
    )
    assert result.required_monthly_contribution == 0
    assert result.total_investment == 0
    assert all(row.cumulative_contributed == 0 for row in result.yearly)
    assert result.yearly[-1].accumulated_value == result.future_value_of_savings


def test_goal_with_savings_needs_less():
    without = required_contribution(2_000_000, 10, 8)
    with_savings = required_contribution(2_000_000, 10, 8, starting_balance=300_000)
    assert 0 < with_savings < without


def test_zero_horizon_is_rejected():
    with pytest.raises(ValidationError):
        required_contribution(100_000, 0, 8)
    with pytest.raises(ValidationError):
        project_contributions({"periodic_amount": 100, "annual_rate_percent": 8, "horizon_years": 0})


def test_overflowing_balance_is_rejected():
    with pytest.raises(ValidationError) as excinfo:
        project_contributions({"periodic_amount": 1e308, "annual_rate_percent": 12, "horizon_years": 1})

    assert "not a finite amount" in str(excinfo.value)
