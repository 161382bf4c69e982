"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from fincalc import __version__
from fincalc.core import errors
from fincalc.core.amortization import build_schedule, summarize_by_year
from fincalc.core.growth import plan_goal, project_contributions
from fincalc.core.rent_vs_buy import compare_rent_vs_buy
from fincalc.core.retirement import plan_retirement
from fincalc.core.tax import calculate_tax, compare_regimes
from fincalc.schemas.growth import ContributionPlan, GoalPlan
from fincalc.schemas.loan import LoanTerms
from fincalc.schemas.ping import PingResponse
from fincalc.schemas.rent_vs_buy import RentVsBuyInputs
from fincalc.schemas.retirement import RetirementInputs
from fincalc.schemas.tax import TaxInputs

api_bp = Blueprint("api", __name__)

CALCULATORS = ["emi", "sip", "goal", "retirement", "tax", "rent-vs-buy"]


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    current_app.logger.info("rejected %s: %d invalid field(s)", request.path, exc.error_count())
    detail = exc.errors(include_url=False, include_context=False, include_input=False)
    return jsonify({"detail": detail}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(errors.ValidationError)
def _handle_engine_error(exc: errors.ValidationError):
    current_app.logger.warning("calculation rejected on %s: %s", request.path, exc)
    return jsonify({"error": exc.errors}), HTTPStatus.BAD_REQUEST


def _payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong", version=__version__, calculators=CALCULATORS)
    return jsonify(response.model_dump())


@api_bp.post("/calc/emi")
def emi() -> Any:
    """Amortization schedule, monthly by default or folded per year."""
    granularity = request.args.get("granularity", "month")
    if granularity not in ("month", "year"):
        raise errors.ValidationError([f"granularity: expected 'month' or 'year', got {granularity!r}"])

    terms = LoanTerms.model_validate(_payload())
    schedule = build_schedule(terms)
    if granularity == "year":
        return jsonify(summarize_by_year(schedule).model_dump(mode="json"))
    return jsonify(schedule.model_dump(mode="json"))


@api_bp.post("/calc/sip")
def sip() -> Any:
    plan = ContributionPlan.model_validate(_payload())
    return jsonify(project_contributions(plan).model_dump(mode="json"))


@api_bp.post("/calc/goal")
def goal() -> Any:
    plan = GoalPlan.model_validate(_payload())
    return jsonify(plan_goal(plan).model_dump(mode="json"))


@api_bp.post("/calc/retirement")
def retirement() -> Any:
    inputs = RetirementInputs.model_validate(_payload())
    return jsonify(plan_retirement(inputs).model_dump(mode="json"))


@api_bp.post("/calc/tax")
def tax() -> Any:
    inputs = TaxInputs.model_validate(_payload())
    return jsonify(calculate_tax(inputs).model_dump(mode="json"))


@api_bp.post("/calc/tax/compare")
def tax_compare() -> Any:
    """Same inputs under both regimes, with the cheaper one recommended."""
    inputs = TaxInputs.model_validate(_payload())
    return jsonify(compare_regimes(inputs).model_dump(mode="json"))


@api_bp.post("/calc/rent-vs-buy")
def rent_vs_buy() -> Any:
    inputs = RentVsBuyInputs.model_validate(_payload())
    return jsonify(compare_rent_vs_buy(inputs).model_dump(mode="json"))
