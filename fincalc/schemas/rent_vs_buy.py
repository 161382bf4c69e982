"""Data contracts for the rent-vs-buy comparator."""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RentVsBuyInputs(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    home_price: float = Field(..., gt=0)
    down_payment: float = Field(..., ge=0)
    loan_rate_percent: float = Field(..., ge=0, le=100)
    loan_tenure_years: int = Field(..., gt=0, le=50)
    monthly_rent: float = Field(..., gt=0)
    annual_rent_increase_percent: float = Field(0.0, ge=0, le=100)
    horizon_years: int = Field(..., gt=0, le=100)

    @model_validator(mode="after")
    def ensure_down_payment_within_price(self) -> "RentVsBuyInputs":
        if self.down_payment > self.home_price:
            raise ValueError("down_payment must not exceed home_price")
        return self

    @property
    def loan_amount(self) -> float:
        return self.home_price - self.down_payment


class CostYear(BaseModel):
    """Cumulative cost of each path at the end of one year."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(..., ge=1)
    cumulative_buy_cost: float = Field(..., ge=0)
    cumulative_rent_cost: float = Field(..., ge=0)


class RentVsBuyResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    loan_amount: float = Field(..., ge=0)
    emi: float = Field(..., ge=0)
    yearly: List[CostYear]
    total_buy_cost: float = Field(..., ge=0)
    total_rent_cost: float = Field(..., ge=0)
    recommendation: Literal["buy", "rent"]
    savings: float = Field(..., ge=0)
    break_even_year: Optional[int] = None
