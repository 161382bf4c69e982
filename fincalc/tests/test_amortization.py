from __future__ import annotations

from math import isclose

import pytest

from fincalc.core.amortization import build_schedule, summarize_by_year
from fincalc.core.errors import ValidationError
from fincalc.schemas.loan import LoanTerms


def ten_lakh_loan() -> LoanTerms:
    return LoanTerms(principal=1_000_000, annual_rate_percent=10, tenure_years=5)


def test_emi_and_total_interest_for_reference_loan():
    schedule = build_schedule(ten_lakh_loan())

    assert isclose(schedule.emi, 21_247.04, abs_tol=0.01)
    assert isclose(schedule.total_interest, 274_822, abs_tol=1.0)
    assert schedule.periods_run == 60
    assert isclose(schedule.total_interest, schedule.total_paid - 1_000_000, abs_tol=0.01)


def test_principal_column_sums_to_loan():
    schedule = build_schedule(ten_lakh_loan())
    assert isclose(sum(entry.principal for entry in schedule.entries), 1_000_000, abs_tol=0.01)


def test_balance_is_non_increasing_and_ends_at_zero():
    schedule = build_schedule(
        LoanTerms(principal=2_500_000, annual_rate_percent=8.5, tenure_years=20)
    )
    balances = [entry.remaining_balance for entry in schedule.entries]

    assert all(later <= earlier for earlier, later in zip(balances, balances[1:]))
    assert min(balances) >= 0
    assert balances[-1] == 0
    assert [entry.period for entry in schedule.entries] == list(range(1, len(balances) + 1))
    assert len(balances) <= 240


def test_zero_rate_loan_repays_principal_only():
    schedule = build_schedule({"principal": 120_000, "annual_rate_percent": 0, "tenure_years": 1})

    assert schedule.emi == 10_000
    assert schedule.total_interest == 0
    assert all(entry.interest == 0 for entry in schedule.entries)
    assert schedule.entries[-1].remaining_balance == 0


def test_invalid_terms_raise_before_computing():
    with pytest.raises(ValidationError) as excinfo:
        build_schedule({"principal": 0, "annual_rate_percent": 10, "tenure_years": 5})

    assert any(message.startswith("principal") for message in excinfo.value.errors)


def test_unvalidated_record_is_revalidated():
    sneaky = LoanTerms.model_construct(principal=-5.0, annual_rate_percent=10.0, tenure_years=1)

    with pytest.raises(ValidationError):
        build_schedule(sneaky)


def test_yearly_summary_folds_twelve_months():
    schedule = build_schedule(ten_lakh_loan())
    yearly = summarize_by_year(schedule)

    assert [row.year for row in yearly.years] == [1, 2, 3, 4, 5]
    assert yearly.years[-1].closing_balance == 0
    assert isclose(sum(row.payments for row in yearly.years), schedule.total_paid, abs_tol=0.1)
    # interest share shrinks as the balance declines
    interest = [row.interest_paid for row in yearly.years]
    assert interest == sorted(interest, reverse=True)


def test_overflowing_payment_is_rejected():
    """A principal near the float ceiling makes the EMI formula overflow to inf."""
    with pytest.raises(ValidationError) as excinfo:
        build_schedule({"principal": 1e308, "annual_rate_percent": 12, "tenure_years": 50})

    assert any("not a finite amount" in message for message in excinfo.value.errors)
