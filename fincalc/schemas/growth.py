"""Data contracts for the SIP and goal-planner calculators."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ContributionPlan(BaseModel):
    """A recurring monthly contribution, optionally stepped up every year."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    periodic_amount: float = Field(..., gt=0, description="Monthly contribution.")
    annual_rate_percent: float = Field(
        ...,
        ge=0,
        le=100,
        description="Expected annual return in percent, compounded monthly.",
    )
    horizon_years: int = Field(..., gt=0, le=100, description="Investment period in years.")
    annual_step_up_percent: float = Field(
        0.0,
        ge=0,
        le=100,
        description="Increase applied to the contribution after every 12 months.",
    )
    starting_balance: float = Field(
        0.0,
        ge=0,
        description="Lump sum already invested at period 0.",
    )


class GrowthSnapshot(BaseModel):
    """Balance at the end of one completed year."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(..., ge=1)
    accumulated_value: float = Field(..., ge=0)
    cumulative_contributed: float = Field(..., ge=0)


class GrowthProjection(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    maturity_amount: float = Field(..., ge=0)
    invested_amount: float = Field(..., ge=0)
    returns: float
    yearly: List[GrowthSnapshot]


class GoalPlan(BaseModel):
    """A target corpus to be reached by a flat monthly contribution."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    target_amount: float = Field(..., gt=0, description="Amount needed at the end of the horizon.")
    horizon_years: int = Field(..., gt=0, le=100, description="Years until the goal.")
    annual_rate_percent: float = Field(
        ...,
        ge=0,
        le=100,
        description="Expected annual return in percent, compounded monthly.",
    )
    starting_balance: float = Field(
        0.0,
        ge=0,
        description="Savings already earmarked for the goal.",
    )


class GoalResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    required_monthly_contribution: float = Field(..., ge=0)
    total_investment: float = Field(..., ge=0)
    returns: float
    future_value_of_savings: float = Field(..., ge=0)
    yearly: List[GrowthSnapshot]
