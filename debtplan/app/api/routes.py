"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from debtplan.core.formatting import format_currency, format_percentage
from debtplan.core.payoff import (
    STRATEGY_DESCRIPTIONS,
    compare_strategies,
    is_fully_paid,
    outstanding_balance,
    payoff_months,
    recommended_percentage,
    simulate,
)
from debtplan.domain.debts import (
    DebtValidationError,
    debt_errors,
    is_debt_valid,
    validate_debts,
)
from debtplan.models import PaymentStrategy
from debtplan.schemas.health import PingResponse
from debtplan.schemas.payoff import (
    DebtValidationRequest,
    DebtValidationResponse,
    DebtValidationResult,
    PaymentPlanRequest,
    PaymentPlanResponse,
    PlanDisplay,
    StrategyComparisonResponse,
    StrategyInfo,
    StrategySummary,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    detail = exc.errors(include_url=False, include_context=False)
    return jsonify({"detail": detail}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(DebtValidationError)
def _handle_debt_validation_error(exc: DebtValidationError):
    logger.info("rejected debts: %s", exc)
    return jsonify({"error": exc.errors}), HTTPStatus.BAD_REQUEST


def _parse_plan_request() -> PaymentPlanRequest:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = PaymentPlanRequest.model_validate(raw_payload)
    validate_debts(payload.debts)
    return payload


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(service=current_app.config["APP_NAME"])
    return jsonify(response.model_dump())


@api_bp.get("/strategies")
def strategies() -> Any:
    """List the payoff strategies with their descriptions."""
    items = [
        StrategyInfo(key=strategy, description=STRATEGY_DESCRIPTIONS[strategy])
        for strategy in PaymentStrategy
    ]
    return jsonify([item.model_dump(mode="json") for item in items])


@api_bp.post("/calc/payoff")
def payoff() -> Any:
    """Month-by-month payoff plan for one strategy."""
    payload = _parse_plan_request()
    plan = simulate(
        payload.debts,
        payload.monthlyBudget,
        payload.strategy,
        payload.monthlyIncome,
    )
    logger.info(
        "payoff plan: %d debts, strategy=%s, %d months",
        len(payload.debts),
        payload.strategy.value,
        plan.months,
    )

    response = PaymentPlanResponse(
        **plan.model_dump(),
        strategy=payload.strategy,
        monthlyBudget=payload.monthlyBudget,
        isFullyPaid=is_fully_paid(plan),
        outstandingBalance=outstanding_balance(plan),
        payoffMonths=payoff_months(plan),
        display=PlanDisplay(
            totalInterest=format_currency(plan.totalInterest),
            monthlyBudget=format_currency(payload.monthlyBudget),
            recommendedPercentage=format_percentage(plan.recommendedPercentage),
        ),
    )
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/calc/payoff/compare")
def compare() -> Any:
    """Summaries of the same debts under every strategy."""
    payload = _parse_plan_request()
    plans = compare_strategies(payload.debts, payload.monthlyBudget, payload.monthlyIncome)

    response = StrategyComparisonResponse(
        monthlyBudget=payload.monthlyBudget,
        recommendedPercentage=recommended_percentage(payload.debts, payload.monthlyIncome),
        strategies={
            strategy: StrategySummary(
                months=plan.months,
                totalInterest=plan.totalInterest,
                isFullyPaid=is_fully_paid(plan),
            )
            for strategy, plan in plans.items()
        },
    )
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/debts/validate")
def validate() -> Any:
    """Per-debt acceptance check for the debt form."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = DebtValidationRequest.model_validate(raw_payload)

    results = []
    for debt in payload.debts:
        results.append(
            DebtValidationResult(
                id=debt.id,
                valid=is_debt_valid(debt),
                errors=debt_errors(debt, strict=True),
            )
        )
    return jsonify(DebtValidationResponse(results=results).model_dump())
