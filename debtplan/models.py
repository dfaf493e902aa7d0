from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class PaymentStrategy(str, Enum):
    SNOWBALL = "snowball"
    AVALANCHE = "avalanche"
    PROPORTIONAL = "proportional"


class Debt(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    name: str = ""
    balance: float = Field(ge=0)
    interestRate: float = Field(ge=0)  # nominal annual percentage, 19.9 == 19.9%
    minimumPayment: float = Field(ge=0)
    totalPayments: int = Field(default=0, ge=0)


class MonthlyPayment(BaseModel):
    model_config = ConfigDict(extra="forbid")

    debtId: str
    minimumPayment: float
    extraPayment: float = 0.0
    interestPaid: float
    remainingBalance: float
    isPaidOff: bool


class MonthlyPlan(BaseModel):
    model_config = ConfigDict(extra="forbid")

    month: int = Field(ge=1)
    payments: List[MonthlyPayment] = Field(default_factory=list)
    totalPayment: float


class PaymentPlanDetail(BaseModel):
    model_config = ConfigDict(extra="forbid")

    months: int = 0
    totalInterest: int = 0
    recommendedPercentage: int = 0
    monthlyPlans: List[MonthlyPlan] = Field(default_factory=list)
