"""Progressive income tax under the old and new regimes.

Bracket tables are plain data: ordered ``(lower_bound, rate)`` pairs where
each bracket runs up to the next pair's lower bound and the last one is
unbounded. A single evaluator walks whichever table the regime selects.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Tuple, Union

from fincalc.core.errors import ensure_valid, money
from fincalc.schemas.tax import RegimeComparison, TaxInputs, TaxRegime, TaxResult

logger = logging.getLogger(__name__)

Bracket = Tuple[float, float]

BRACKETS: Dict[TaxRegime, List[Bracket]] = {
    TaxRegime.OLD: [
        (0, 0.0),
        (250_000, 0.05),
        (500_000, 0.20),
        (1_000_000, 0.30),
    ],
    TaxRegime.NEW: [
        (0, 0.0),
        (300_000, 0.05),
        (700_000, 0.10),
        (1_000_000, 0.15),
        (1_200_000, 0.20),
        (1_500_000, 0.30),
    ],
}

# deduction caps; only the old regime allows deductions at all
SECTION_80C_CAP = 150_000
SECTION_80D_CAP = 25_000
NPS_CAP = 50_000


def tax_for_regime(taxable_income: float, regime: TaxRegime) -> float:
    """Tax on ``taxable_income``: each bracket taxes min(excess, width) at its rate."""
    if taxable_income <= 0:
        return 0.0

    brackets = BRACKETS[TaxRegime(regime)]
    tax = 0.0
    for index, (lower, rate) in enumerate(brackets):
        if taxable_income <= lower:
            break
        upper = brackets[index + 1][0] if index + 1 < len(brackets) else float("inf")
        tax += (min(taxable_income, upper) - lower) * rate
    return tax


def eligible_deductions(inputs: TaxInputs) -> Tuple[float, float, float]:
    """Capped (80C, 80D, NPS) amounts the regime lets the taxpayer claim."""
    if inputs.regime is TaxRegime.NEW:
        return 0.0, 0.0, 0.0
    return (
        min(inputs.section_80c, SECTION_80C_CAP),
        min(inputs.section_80d, SECTION_80D_CAP),
        min(inputs.nps_contribution, NPS_CAP),
    )


def calculate_tax(inputs: Union[TaxInputs, Mapping[str, Any]]) -> TaxResult:
    """Tax with and without the regime's deductions, and what they save."""
    inputs = ensure_valid(TaxInputs, inputs)
    gross = inputs.gross_income

    eligible_80c, eligible_80d, eligible_nps = eligible_deductions(inputs)
    total_deductions = eligible_80c + eligible_80d + eligible_nps
    taxable_income = max(gross - total_deductions, 0.0)

    tax_before = tax_for_regime(gross, inputs.regime)
    tax_after = tax_for_regime(taxable_income, inputs.regime)

    return TaxResult(
        regime=inputs.regime,
        gross_income=money(gross, "gross_income"),
        eligible_80c=money(eligible_80c, "eligible_80c"),
        eligible_80d=money(eligible_80d, "eligible_80d"),
        eligible_nps=money(eligible_nps, "eligible_nps"),
        total_deductions=money(total_deductions, "total_deductions"),
        taxable_income=money(taxable_income, "taxable_income"),
        tax_before_deductions=money(tax_before, "tax_before_deductions"),
        tax_after_deductions=money(tax_after, "tax_after_deductions"),
        tax_savings=money(tax_before - tax_after, "tax_savings"),
        effective_rate_percent=money(tax_after / gross * 100, "effective_rate_percent"),
        take_home=money(gross - tax_after, "take_home"),
    )


def compare_regimes(inputs: Union[TaxInputs, Mapping[str, Any]]) -> RegimeComparison:
    """Evaluate both regimes on the same inputs and pick the cheaper one.

    A tie goes to the new regime, which needs no investment proofs.
    """
    inputs = ensure_valid(TaxInputs, inputs)
    old = calculate_tax(inputs.model_copy(update={"regime": TaxRegime.OLD}))
    new = calculate_tax(inputs.model_copy(update={"regime": TaxRegime.NEW}))

    if old.tax_after_deductions < new.tax_after_deductions:
        recommended = TaxRegime.OLD
    else:
        recommended = TaxRegime.NEW
    logger.debug(
        "old regime tax %.2f, new regime tax %.2f",
        old.tax_after_deductions,
        new.tax_after_deductions,
    )

    return RegimeComparison(
        old_regime=old,
        new_regime=new,
        recommended_regime=recommended,
        difference=money(abs(old.tax_after_deductions - new.tax_after_deductions), "difference"),
    )
