"""Pure calculation logic. Nothing here touches Flask or does I/O."""

from fincalc.core.amortization import build_schedule, summarize_by_year
from fincalc.core.annuity import annuity_factor, fixed_payment, future_value_lump_sum
from fincalc.core.errors import DomainError, ValidationError
from fincalc.core.growth import plan_goal, project_contributions, required_contribution
from fincalc.core.rent_vs_buy import compare_rent_vs_buy
from fincalc.core.retirement import plan_retirement
from fincalc.core.tax import calculate_tax, compare_regimes, tax_for_regime

__all__ = [
    "DomainError",
    "ValidationError",
    "annuity_factor",
    "build_schedule",
    "calculate_tax",
    "compare_regimes",
    "compare_rent_vs_buy",
    "fixed_payment",
    "future_value_lump_sum",
    "plan_goal",
    "plan_retirement",
    "project_contributions",
    "required_contribution",
    "summarize_by_year",
    "tax_for_regime",
]
