"""Data contracts for the payoff endpoints."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from debtplan.core.formatting import parse_currency_string
from debtplan.core.payoff import derive_monthly_budget
from debtplan.models import Debt, PaymentPlanDetail, PaymentStrategy


class PaymentPlanRequest(BaseModel):
    """Debts plus the budget inputs for one simulation."""

    model_config = ConfigDict(extra="forbid")

    debts: List[Debt] = Field(default_factory=list)
    monthlyIncome: float = Field(0.0, ge=0, description="Used for the recommended percentage.")
    monthlyBudget: Optional[float] = Field(
        default=None,
        description="Total available per month across all debts.",
    )
    budgetPercentage: Optional[float] = Field(
        default=None,
        ge=0,
        le=100,
        description="Share of monthlyIncome for debt; used when monthlyBudget is missing.",
    )
    strategy: PaymentStrategy = PaymentStrategy.SNOWBALL

    @field_validator("monthlyIncome", "monthlyBudget", mode="before")
    @classmethod
    def parse_formatted_amount(cls, value: Any) -> Any:
        # the currency inputs send "$1.500.000" style strings
        if isinstance(value, str):
            return parse_currency_string(value)
        return value

    @model_validator(mode="after")
    def ensure_budget(self) -> "PaymentPlanRequest":
        if self.monthlyBudget is None:
            if self.budgetPercentage is None:
                raise ValueError("either monthlyBudget or budgetPercentage is required")
            self.monthlyBudget = derive_monthly_budget(self.monthlyIncome, self.budgetPercentage)
        return self


class PlanDisplay(BaseModel):
    """Amounts pre-formatted for the plan screen."""

    totalInterest: str
    monthlyBudget: str
    recommendedPercentage: str


class PaymentPlanResponse(PaymentPlanDetail):
    """Simulation result plus the summaries the plan screen shows."""

    strategy: PaymentStrategy
    monthlyBudget: float
    isFullyPaid: bool
    outstandingBalance: float
    payoffMonths: Dict[str, int] = Field(default_factory=dict)
    display: PlanDisplay


class StrategySummary(BaseModel):
    months: int
    totalInterest: int
    isFullyPaid: bool


class StrategyComparisonResponse(BaseModel):
    monthlyBudget: float
    recommendedPercentage: int
    strategies: Dict[PaymentStrategy, StrategySummary]


class StrategyInfo(BaseModel):
    key: PaymentStrategy
    description: str


class DebtValidationRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    debts: List[Debt] = Field(default_factory=list)


class DebtValidationResult(BaseModel):
    id: str
    valid: bool
    errors: List[str] = Field(default_factory=list)


class DebtValidationResponse(BaseModel):
    results: List[DebtValidationResult]
