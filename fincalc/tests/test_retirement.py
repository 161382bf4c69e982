from __future__ import annotations

from math import isclose

import pytest

from fincalc.core.errors import ValidationError
from fincalc.core.retirement import plan_retirement
from fincalc.schemas.retirement import RetirementInputs


def retirement_inputs(**overrides) -> dict:
    inputs = {
        "current_age": 30,
        "retirement_age": 60,
        "annual_salary": 1_200_000,
        "current_savings": 0,
        "inflation_percent": 6,
        "expected_return_percent": 12,
        "expense_ratio": 0.5,
    }
    inputs.update(overrides)
    return inputs


def test_required_corpus_is_25_years_of_inflated_expense():
    plan = plan_retirement(retirement_inputs())

    expense_at_retirement = 50_000 * 1.06 ** 30
    assert plan.years_to_retirement == 30
    assert plan.monthly_expense_today == 50_000
    assert isclose(plan.monthly_expense_at_retirement, expense_at_retirement, abs_tol=0.01)
    assert isclose(plan.required_corpus, expense_at_retirement * 12 * 25, abs_tol=0.01)


def test_projection_reaches_required_corpus():
    plan = plan_retirement(retirement_inputs(current_savings=500_000))

    assert len(plan.yearly) == plan.years_to_retirement
    assert all(row.required_corpus == plan.required_corpus for row in plan.yearly)
    projected = [row.projected_corpus for row in plan.yearly]
    assert projected == sorted(projected)
    assert isclose(projected[-1], plan.required_corpus, rel_tol=1e-3)


def test_savings_reduce_monthly_contribution():
    bare = plan_retirement(retirement_inputs())
    saver = plan_retirement(retirement_inputs(current_savings=1_000_000))

    assert saver.monthly_contribution_needed < bare.monthly_contribution_needed
    assert isclose(
        saver.covered_by_savings + saver.corpus_shortfall,
        saver.required_corpus,
        abs_tol=0.02,
    )


def test_savings_that_cover_corpus_need_no_contribution():
    plan = plan_retirement(retirement_inputs(current_savings=500_000_000))

    assert plan.monthly_contribution_needed == 0
    assert plan.corpus_shortfall == 0
    assert plan.covered_by_savings == plan.required_corpus
    assert plan.total_investment_needed == 500_000_000


def test_zero_return_contribution_is_straight_division():
    plan = plan_retirement(retirement_inputs(expected_return_percent=0, inflation_percent=0))

    # 50k/month * 12 * 25 spread across 360 months
    assert isclose(plan.required_corpus, 15_000_000)
    assert isclose(plan.monthly_contribution_needed, 15_000_000 / 360, abs_tol=0.01)


@pytest.mark.parametrize("retirement_age", [30, 25])
def test_no_time_to_plan_is_rejected(retirement_age):
    with pytest.raises(ValidationError) as excinfo:
        plan_retirement(retirement_inputs(retirement_age=retirement_age))

    assert "no time to plan" in str(excinfo.value)


def test_expense_ratio_must_be_a_fraction():
    with pytest.raises(ValidationError):
        plan_retirement(retirement_inputs(expense_ratio=1.5))


def test_inputs_expose_years_to_retirement():
    assert RetirementInputs(**retirement_inputs(retirement_age=45)).years_to_retirement == 15


def test_hundred_year_span_is_planned():
    plan = plan_retirement(retirement_inputs(current_age=0, retirement_age=100))

    assert plan.years_to_retirement == 100
    assert len(plan.yearly) == 100


def test_span_beyond_hundred_years_is_rejected_on_ages():
    with pytest.raises(ValidationError) as excinfo:
        plan_retirement(retirement_inputs(current_age=0, retirement_age=101))

    assert "at most 100 years away" in str(excinfo.value)
    assert "horizon_years" not in str(excinfo.value)
