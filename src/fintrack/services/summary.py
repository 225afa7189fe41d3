"""Aggregate totals over a set of transactions."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable

from ..models.transaction import Transaction, TransactionType

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value: Any) -> Decimal:
    """Coerce a stored amount to a two-place ``Decimal`` without passing through float."""

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, float):
        amount = Decimal(str(value))
    else:
        amount = Decimal(value)
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


@dataclass(frozen=True, slots=True)
class SummaryResult:
    """Totals for a slice of transactions. Derived on demand, never cached."""

    total_income: Decimal = ZERO
    total_expenses: Decimal = ZERO
    net_income: Decimal = ZERO
    transaction_count: int = 0

    @property
    def average_expense(self) -> Decimal:
        """Expenses spread over every transaction, matching the dashboard quick stat."""

        if self.transaction_count == 0:
            return ZERO
        return (self.total_expenses / self.transaction_count).quantize(
            CENTS, rounding=ROUND_HALF_UP
        )

    @property
    def savings_rate(self) -> Decimal:
        """Net income as a percentage of income, one decimal place."""

        if self.total_income <= 0:
            return Decimal("0.0")
        rate = self.net_income / self.total_income * 100
        return rate.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalIncome": f"{self.total_income:.2f}",
            "totalExpenses": f"{self.total_expenses:.2f}",
            "netIncome": f"{self.net_income:.2f}",
            "transactionCount": self.transaction_count,
            "averageExpense": f"{self.average_expense:.2f}",
            "savingsRate": f"{self.savings_rate:.1f}",
        }


def compute_summary(transactions: Iterable[Transaction]) -> SummaryResult:
    """Reduce transactions to income, expense, net and count totals.

    Empty input yields an all-zero result. Order of ``transactions`` is irrelevant.
    """

    income = ZERO
    expenses = ZERO
    count = 0
    for tx in transactions:
        amount = to_money(tx.amount)
        if TransactionType(tx.type) is TransactionType.INCOME:
            income += amount
        else:
            expenses += amount
        count += 1

    return SummaryResult(
        total_income=income,
        total_expenses=expenses,
        net_income=income - expenses,
        transaction_count=count,
    )


__all__ = ["CENTS", "SummaryResult", "compute_summary", "to_money"]
