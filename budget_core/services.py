"""Framework-agnostic business services for the budget tracker."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .models import Expense, Income

__all__ = [
    "BudgetSummary",
    "CategoryTotal",
    "EntryStore",
    "LedgerService",
    "percentage_of",
]

logger = logging.getLogger(__name__)


def percentage_of(category_total: float, total_expenses: float) -> float:
    """Share of ``total_expenses`` taken by ``category_total``, in percent.

    Returns 0.0 when there are no expenses to divide by.
    """
    if total_expenses > 0:
        return category_total / total_expenses * 100
    return 0.0


@dataclass(frozen=True)
class CategoryTotal:
    category: str
    total: float
    percentage: float


@dataclass(frozen=True)
class BudgetSummary:
    total_income: float
    total_expenses: float
    net_savings: float
    categories: List[CategoryTotal] = field(default_factory=list)

    @property
    def has_expenses(self) -> bool:
        return bool(self.categories)


class EntryStore:
    """Holds the income and expense records of one session, in insertion order."""

    def __init__(self) -> None:
        self._incomes: List[Income] = []
        self._expenses: List[Expense] = []

    def add_income(self, record: Income) -> None:
        self._incomes.append(record)
        logger.debug("Stored income from %s (%.2f)", record.source, record.amount)

    def add_expense(self, record: Expense) -> None:
        self._expenses.append(record)
        logger.debug("Stored expense in %s (%.2f)", record.category, record.amount)

    def incomes(self) -> Tuple[Income, ...]:
        return tuple(self._incomes)

    def expenses(self) -> Tuple[Expense, ...]:
        return tuple(self._expenses)

    def __len__(self) -> int:
        return len(self._incomes) + len(self._expenses)


class LedgerService:
    """Aggregates the store's incomes and expenses into totals and a breakdown."""

    percentage_of = staticmethod(percentage_of)

    def __init__(self, store: EntryStore) -> None:
        self._store = store

    def total_income(self) -> float:
        return _sum_amounts(self._store.incomes())

    def total_expenses(self) -> float:
        return _sum_amounts(self._store.expenses())

    def net_savings(self) -> float:
        """Compute income minus expenses; negative when overspent."""
        return self.total_income() - self.total_expenses()

    def expense_breakdown(self) -> Dict[str, float]:
        """Sum expense amounts per category (exact, case-sensitive match)."""
        return _group_by_category(self._store.expenses())

    def summary(self) -> BudgetSummary:
        """Compute every figure of the budget summary from one view of the store."""
        incomes = self._store.incomes()
        expenses = self._store.expenses()
        total_income = _sum_amounts(incomes)
        total_expenses = _sum_amounts(expenses)
        categories = [
            CategoryTotal(category, total, percentage_of(total, total_expenses))
            for category, total in _group_by_category(expenses).items()
        ]
        logger.debug(
            "Summarised %d incomes and %d expenses across %d categories",
            len(incomes),
            len(expenses),
            len(categories),
        )
        return BudgetSummary(
            total_income=total_income,
            total_expenses=total_expenses,
            net_savings=total_income - total_expenses,
            categories=categories,
        )


def _sum_amounts(records) -> float:
    # Plain left-to-right accumulation keeps the insertion-order float sum.
    total = 0.0
    for record in records:
        total += record.amount
    return total


def _group_by_category(expenses) -> Dict[str, float]:
    breakdown: Dict[str, float] = {}
    for expense in expenses:
        breakdown[expense.category] = breakdown.get(expense.category, 0.0) + expense.amount
    return breakdown
