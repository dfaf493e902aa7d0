"""Debt payoff simulation.

Simulates month-by-month amortization of a set of debts under one of three
allocation strategies. The input debts are never mutated; every run works on
its own list of ``_DebtState`` rows built from them.

Order of operations (per month):
  1) Every remaining debt pays ``min(minimumPayment, balance)`` and accrues
     interest on its pre-payment balance; interest is added to the balance.
  2) Whatever is left of the monthly budget is allocated by strategy:
       - proportional: split across debts by share of remaining balance
       - snowball / avalanche: all of it to the first debt in the fixed order
  3) Debts that reached zero drop out before the next month.

The processing order is decided once, before the first month.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List, Sequence, Union

from debtplan.models import (
    Debt,
    MonthlyPayment,
    MonthlyPlan,
    PaymentPlanDetail,
    PaymentStrategy,
)

logger = logging.getLogger(__name__)

MAX_MONTHS = 360  # 30 years

STRATEGY_DESCRIPTIONS: Dict[PaymentStrategy, str] = {
    PaymentStrategy.SNOWBALL: (
        "The snowball method pays off the smallest debts first, regardless of "
        "interest rate. Watching debts disappear quickly builds momentum and motivation."
    ),
    PaymentStrategy.AVALANCHE: (
        "The avalanche method pays off the debts with the highest interest rates first. "
        "It minimizes the total interest paid and is the mathematically cheapest option."
    ),
    PaymentStrategy.PROPORTIONAL: (
        "The proportional method splits the extra payment across all debts according "
        "to their balance. A balanced approach that reduces every debt gradually."
    ),
}


@dataclass
class _DebtState:
    id: str
    balance: float
    interest_rate: float
    minimum_payment: float
    # filled in each month
    minimum_applied: float = 0.0
    extra_applied: float = 0.0
    interest_accrued: float = 0.0


def derive_monthly_budget(monthly_income: float, percentage: float) -> float:
    """Return the share of income set aside for debt, ``percentage`` in 0..100."""
    return monthly_income * percentage / 100


def recommended_percentage(debts: Sequence[Debt], monthly_income: float) -> int:
    """Smallest whole percent of income that covers every minimum payment."""
    if not debts or monthly_income <= 0:
        return 0
    total_minimum = sum(Decimal(str(debt.minimumPayment)) for debt in debts)
    return math.ceil(total_minimum * 100 / Decimal(str(monthly_income)))


def _order_debts(debts: Sequence[Debt], strategy: PaymentStrategy) -> List[_DebtState]:
    states = [
        _DebtState(
            id=debt.id,
            balance=float(debt.balance),
            interest_rate=float(debt.interestRate),
            minimum_payment=float(debt.minimumPayment),
        )
        for debt in debts
    ]
    if strategy == PaymentStrategy.SNOWBALL:
        states.sort(key=lambda s: s.balance)
    elif strategy == PaymentStrategy.AVALANCHE:
        states.sort(key=lambda s: s.interest_rate, reverse=True)
    return states


def _pay_minimums(remaining: List[_DebtState], budget: float) -> float:
    """Apply minimum payments and interest; return what is left of ``budget``."""
    available = budget
    for state in remaining:
        applied = min(state.minimum_payment, state.balance)
        interest = state.balance * (state.interest_rate / 100 / 12)
        available -= applied

        state.minimum_applied = applied
        state.interest_accrued = interest
        state.extra_applied = 0.0
        state.balance = max(0.0, state.balance - applied + interest)
    return available


def _allocate_proportional(remaining: List[_DebtState], available: float) -> None:
    total_balance = sum(state.balance for state in remaining)
    for state in remaining:
        if state.balance > 0:
            extra = available * (state.balance / total_balance)
            state.extra_applied = extra
            state.balance = max(0.0, state.balance - extra)


def _allocate_to_first(remaining: List[_DebtState], available: float) -> None:
    # no spillover: a debt cleared here frees the surplus only from next month on
    first = remaining[0]
    first.extra_applied = available
    first.balance = max(0.0, first.balance - available)


def _close_month(month: int, remaining: List[_DebtState]) -> MonthlyPlan:
    total = 0.0
    for state in remaining:
        total += state.minimum_applied
    for state in remaining:
        if state.extra_applied:
            total += state.extra_applied

    payments = [
        MonthlyPayment(
            debtId=state.id,
            minimumPayment=state.minimum_applied,
            extraPayment=state.extra_applied,
            interestPaid=state.interest_accrued,
            remainingBalance=state.balance,
            isPaidOff=state.balance == 0,
        )
        for state in remaining
    ]
    return MonthlyPlan(month=month, payments=payments, totalPayment=total)


def simulate(
    debts: Sequence[Debt],
    monthly_budget: float,
    strategy: Union[PaymentStrategy, str],
    monthly_income: float,
) -> PaymentPlanDetail:
    """
    Simulate paying off ``debts`` with ``monthly_budget`` per month.

    Stops once every balance is zero or after MAX_MONTHS months, whichever is
    first. Hitting the cap is not an error: check ``is_fully_paid`` on the
    result to tell the two apart.
    """
    strategy = PaymentStrategy(strategy)
    if not debts:
        return PaymentPlanDetail(months=0, totalInterest=0, recommendedPercentage=0, monthlyPlans=[])

    logger.debug(
        "simulating %d debts, strategy=%s budget=%.2f", len(debts), strategy.value, monthly_budget
    )

    remaining = _order_debts(debts, strategy)
    total_interest = 0.0
    monthly_plans: List[MonthlyPlan] = []

    while remaining and len(monthly_plans) < MAX_MONTHS:
        month = len(monthly_plans) + 1

        available = _pay_minimums(remaining, monthly_budget)
        for state in remaining:
            total_interest += state.interest_accrued

        if available > 0:
            if strategy == PaymentStrategy.PROPORTIONAL:
                _allocate_proportional(remaining, available)
            else:
                _allocate_to_first(remaining, available)

        monthly_plans.append(_close_month(month, remaining))
        remaining = [state for state in remaining if state.balance > 0]

    if remaining:
        logger.warning(
            "payoff simulation stopped at the %d-month cap with %d debts outstanding",
            MAX_MONTHS,
            len(remaining),
        )

    plan = PaymentPlanDetail(
        months=len(monthly_plans),
        totalInterest=int(Decimal(total_interest).to_integral_value(rounding=ROUND_HALF_UP)),
        recommendedPercentage=recommended_percentage(debts, monthly_income),
        monthlyPlans=monthly_plans,
    )
    logger.debug("simulation finished after %d months", plan.months)
    return plan


def compare_strategies(
    debts: Sequence[Debt],
    monthly_budget: float,
    monthly_income: float,
) -> Dict[PaymentStrategy, PaymentPlanDetail]:
    """Run the same inputs through every strategy."""
    return {
        strategy: simulate(debts, monthly_budget, strategy, monthly_income)
        for strategy in PaymentStrategy
    }


def payoff_months(plan: PaymentPlanDetail) -> Dict[str, int]:
    """Map each debt id to the month it reached a zero balance."""
    paid: Dict[str, int] = {}
    for monthly in plan.monthlyPlans:
        for payment in monthly.payments:
            if payment.isPaidOff and payment.debtId not in paid:
                paid[payment.debtId] = monthly.month
    return paid


def outstanding_balance(plan: PaymentPlanDetail) -> float:
    if not plan.monthlyPlans:
        return 0.0
    return sum(payment.remainingBalance for payment in plan.monthlyPlans[-1].payments)


def is_fully_paid(plan: PaymentPlanDetail) -> bool:
    return outstanding_balance(plan) == 0


__all__ = [
    "MAX_MONTHS",
    "STRATEGY_DESCRIPTIONS",
    "derive_monthly_budget",
    "recommended_percentage",
    "simulate",
    "compare_strategies",
    "payoff_months",
    "outstanding_balance",
    "is_fully_paid",
]
