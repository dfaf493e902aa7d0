from __future__ import annotations

from collections import Counter
from typing import Iterable, List

from debtplan.models import Debt


class DebtValidationError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


def is_simulatable(debt: Debt) -> bool:
    """A debt the payoff simulation can make progress on."""
    return debt.balance > 0 and debt.interestRate >= 0 and debt.minimumPayment > 0


def is_debt_valid(debt: Debt) -> bool:
    """Acceptance check used before a debt is saved from the form."""
    return (
        debt.name.strip() != ""
        and debt.balance > 0
        and debt.interestRate > 0
        and debt.minimumPayment > 0
        and debt.totalPayments > 0
    )


def debt_errors(debt: Debt, strict: bool = False) -> List[str]:
    label = debt.name.strip() or debt.id
    errors: List[str] = []

    if strict and not debt.name.strip():
        errors.append(f"{label} name is required")
    if debt.balance <= 0:
        errors.append(f"{label} balance must be greater than 0")
    if strict and debt.interestRate <= 0:
        errors.append(f"{label} interest rate must be greater than 0")
    elif debt.interestRate < 0:
        errors.append(f"{label} interest rate must not be negative")
    if debt.minimumPayment <= 0:
        errors.append(f"{label} minimum payment must be greater than 0")
    if strict and debt.totalPayments <= 0:
        errors.append(f"{label} total payments must be greater than 0")

    return errors


def validate_debts(debts: Iterable[Debt], strict: bool = False) -> None:
    debts = list(debts)
    errors: List[str] = []

    duplicated = [debt_id for debt_id, count in Counter(d.id for d in debts).items() if count > 1]
    for debt_id in duplicated:
        errors.append(f"duplicate debt id {debt_id}")

    accepted = is_debt_valid if strict else is_simulatable
    for debt in debts:
        if not accepted(debt):
            errors.extend(debt_errors(debt, strict=strict))

    if errors:
        raise DebtValidationError(errors)
