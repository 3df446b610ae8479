"""Core business logic package for the budget tracker."""

from .config import TrackerSettings
from .exceptions import EmptyFieldError, NotANumberError, OutOfRangeError, ValidationError
from .models import Expense, Income
from .services import BudgetSummary, CategoryTotal, EntryStore, LedgerService, percentage_of

__all__ = [
    "BudgetSummary",
    "CategoryTotal",
    "EmptyFieldError",
    "EntryStore",
    "Expense",
    "Income",
    "LedgerService",
    "NotANumberError",
    "OutOfRangeError",
    "TrackerSettings",
    "ValidationError",
    "percentage_of",
]
