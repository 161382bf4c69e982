"""Data contracts for the retirement planner."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, model_validator

# same ceiling as the growth projector's horizon_years
MAX_PLANNING_YEARS = 100


class RetirementInputs(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    current_age: int = Field(..., ge=0, le=120)
    retirement_age: int = Field(..., ge=1, le=120)
    annual_salary: float = Field(..., gt=0)
    current_savings: float = Field(0.0, ge=0)
    inflation_percent: float = Field(..., ge=0, le=100)
    expected_return_percent: float = Field(..., ge=0, le=100)
    expense_ratio: float = Field(
        ...,
        gt=0,
        le=1,
        description="Share of today's salary needed as monthly expense in retirement.",
    )

    @model_validator(mode="after")
    def ensure_time_to_plan(self) -> "RetirementInputs":
        if self.retirement_age <= self.current_age:
            raise ValueError("retirement_age must be greater than current_age: no time to plan")
        if self.retirement_age - self.current_age > MAX_PLANNING_YEARS:
            raise ValueError(f"retirement must be at most {MAX_PLANNING_YEARS} years away")
        return self

    @property
    def years_to_retirement(self) -> int:
        return self.retirement_age - self.current_age


class RetirementYear(BaseModel):
    """Projected corpus against the (constant) required corpus for one year."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(..., ge=1)
    projected_corpus: float = Field(..., ge=0)
    required_corpus: float = Field(..., ge=0)


class RetirementPlan(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    years_to_retirement: int = Field(..., ge=1)
    monthly_expense_today: float = Field(..., ge=0)
    monthly_expense_at_retirement: float = Field(..., ge=0)
    required_corpus: float = Field(..., ge=0)
    future_value_of_savings: float = Field(..., ge=0)
    # pie split: what existing savings cover vs. what SIPs must fund
    covered_by_savings: float = Field(..., ge=0)
    corpus_shortfall: float = Field(..., ge=0)
    monthly_contribution_needed: float = Field(..., ge=0)
    total_investment_needed: float = Field(..., ge=0)
    yearly: List[RetirementYear]
