"""Data contracts for the EMI calculator."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class LoanTerms(BaseModel):
    """Inputs required to amortize a fixed-rate loan."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    principal: float = Field(..., gt=0, description="Amount borrowed.")
    annual_rate_percent: float = Field(
        ...,
        ge=0,
        le=100,
        description="Nominal annual interest rate in percent (e.g. 10 for 10%).",
    )
    tenure_years: int = Field(..., gt=0, le=50, description="Loan tenure in years.")

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate_percent / 12 / 100

    @property
    def total_months(self) -> int:
        return self.tenure_years * 12


class AmortizationEntry(BaseModel):
    """Single month of an amortization schedule."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    period: int = Field(..., ge=1)
    payment: float = Field(..., ge=0)
    interest: float = Field(..., ge=0)
    principal: float
    remaining_balance: float = Field(..., ge=0)


class AmortizationYear(BaseModel):
    """Twelve schedule entries folded into one row."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(..., ge=1)
    payments: float = Field(..., ge=0)
    principal_paid: float
    interest_paid: float = Field(..., ge=0)
    closing_balance: float = Field(..., ge=0)


class LoanSchedule(BaseModel):
    """Fixed payment, totals and the month-by-month schedule."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    emi: float = Field(..., ge=0)
    total_paid: float = Field(..., ge=0)
    total_interest: float
    periods_run: int = Field(..., ge=0)
    entries: List[AmortizationEntry]


class YearlyLoanSchedule(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    emi: float = Field(..., ge=0)
    total_paid: float = Field(..., ge=0)
    total_interest: float
    periods_run: int = Field(..., ge=0)
    years: List[AmortizationYear]
