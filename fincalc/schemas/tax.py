"""Data contracts for the tax-benefits calculator."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TaxRegime(str, Enum):
    OLD = "OLD_REGIME"
    NEW = "NEW_REGIME"


class TaxInputs(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    gross_income: float = Field(..., gt=0, description="Annual gross income.")
    regime: TaxRegime = TaxRegime.OLD
    section_80c: float = Field(0.0, ge=0, description="Claimed 80C investments.")
    section_80d: float = Field(0.0, ge=0, description="Claimed 80D health premiums.")
    nps_contribution: float = Field(0.0, ge=0, description="Claimed NPS contribution.")


class TaxResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    regime: TaxRegime
    gross_income: float = Field(..., ge=0)
    eligible_80c: float = Field(..., ge=0)
    eligible_80d: float = Field(..., ge=0)
    eligible_nps: float = Field(..., ge=0)
    total_deductions: float = Field(..., ge=0)
    taxable_income: float = Field(..., ge=0)
    tax_before_deductions: float = Field(..., ge=0)
    tax_after_deductions: float = Field(..., ge=0)
    tax_savings: float = Field(..., ge=0)
    effective_rate_percent: float = Field(..., ge=0)
    take_home: float


class RegimeComparison(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    old_regime: TaxResult
    new_regime: TaxResult
    recommended_regime: TaxRegime
    difference: float = Field(..., ge=0, description="Tax saved by the recommended regime.")
