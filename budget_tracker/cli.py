"""Interactive console interface for the budget tracker."""

from __future__ import annotations

import logging
import sys
from typing import Callable, List, Optional, TextIO, TypeVar

from budget_core.config import TrackerSettings
from budget_core.exceptions import EmptyFieldError, NotANumberError, OutOfRangeError
from budget_core.models import Expense, Income
from budget_core.services import BudgetSummary, EntryStore, LedgerService
from budget_core.validators import parse_amount, parse_choice, validate_required_str

from budget_tracker.console import ConsoleIO

logger = logging.getLogger(__name__)

ADD_INCOME, ADD_EXPENSE, VIEW_SUMMARY, EXIT = 1, 2, 3, 4

T = TypeVar("T")


class BudgetShell:
    """Menu loop that collects validated entries and renders the summary."""

    def __init__(
        self,
        console: ConsoleIO,
        store: EntryStore,
        ledger: LedgerService,
        settings: Optional[TrackerSettings] = None,
    ) -> None:
        self._console = console
        self._store = store
        self._ledger = ledger
        self._settings = settings or TrackerSettings()

    def run(self) -> None:
        """Loop until the user picks Exit; the console is released on every path."""
        logger.info("Budget tracker session started")
        with self._console:
            try:
                while self._step():
                    pass
            except EOFError:
                logger.info("Console input ended before Exit was chosen")
        logger.info("Budget tracker session ended with %d entries", len(self._store))

    def _step(self) -> bool:
        self._show_menu()
        choice = self._read_choice()
        if choice == ADD_INCOME:
            self.add_income()
        elif choice == ADD_EXPENSE:
            self.add_expense()
        elif choice == VIEW_SUMMARY:
            self.view_summary()
        elif choice == EXIT:
            self._console.writeline("Exiting program. Thank you!")
            return False
        return True

    def _show_menu(self) -> None:
        out = self._console
        out.writeline()
        out.writeline("=== Personal Budget Tracker ===")
        out.writeline("1. Add Income")
        out.writeline("2. Add Expense")
        out.writeline("3. View Budget Summary")
        out.writeline("4. Exit")
        out.write(f"Enter your choice ({ADD_INCOME}-{EXIT}): ")

    # Actions --------------------------------------------------------------
    def add_income(self) -> Income:
        out = self._console
        out.writeline()
        out.writeline("--- Add New Income ---")
        out.write("Enter income source (e.g., Salary): ")
        source = self._read_text("source", "Source cannot be empty. Try again: ")
        out.write(f"Enter income amount: {self._settings.currency_symbol}")
        amount = self._read_amount()
        out.write("Enter income date (MM/DD/YYYY): ")
        date = self._read_text("date", "Date cannot be empty. Try again: ")

        income = Income(date=date, amount=amount, source=source)
        self._store.add_income(income)
        out.writeline(f"Success! Income from {source} ({self._money(amount)}) added.")
        return income

    def add_expense(self) -> Expense:
        out = self._console
        out.writeline()
        out.writeline("--- Add New Expense ---")
        out.write("Enter expense category (e.g., Rent): ")
        category = self._read_text("category", "Category cannot be empty. Try again: ")
        out.write(f"Enter expense amount: {self._settings.currency_symbol}")
        amount = self._read_amount()
        out.write("Enter expense date (MM/DD/YYYY): ")
        date = self._read_text("date", "Date cannot be empty. Try again: ")

        expense = Expense(date=date, amount=amount, category=category)
        self._store.add_expense(expense)
        out.writeline(f"Success! Expense ({category}: {self._money(amount)}) added.")
        return expense

    def view_summary(self) -> BudgetSummary:
        summary = self._ledger.summary()
        for line in format_summary(summary, self._settings):
            self._console.writeline(line)
        return summary

    # Input helpers --------------------------------------------------------
    def _read_choice(self) -> int:
        low, high = ADD_INCOME, EXIT
        return self._retry(
            lambda: parse_choice(self._console.read_token(), low, high),
            not_a_number="Invalid input. Please enter a whole number: ",
            out_of_range=f"Please enter a number between {low} and {high}: ",
        )

    def _read_amount(self) -> float:
        symbol = self._settings.currency_symbol
        return self._retry(
            lambda: parse_amount(self._console.read_token()),
            not_a_number=f"Invalid input. Please enter a number: {symbol}",
            out_of_range=f"Amount must be positive. Try again: {symbol}",
        )

    def _read_text(self, field: str, retry_prompt: str) -> str:
        while True:
            try:
                return validate_required_str(self._console.readline(), field)
            except EmptyFieldError:
                self._console.write(retry_prompt)

    def _retry(self, parse: Callable[[], T], *, not_a_number: str, out_of_range: str) -> T:
        while True:
            try:
                return parse()
            except NotANumberError as exc:
                logger.debug("Rejected input: %s", exc)
                self._console.write(not_a_number)
            except OutOfRangeError as exc:
                logger.debug("Rejected input: %s", exc)
                self._console.write(out_of_range)

    def _money(self, amount: float) -> str:
        return self._settings.format_amount(amount)


def format_summary(summary: BudgetSummary, settings: TrackerSettings) -> List[str]:
    lines = [
        "",
        "=== Budget Summary ===",
        f"Total Income: {settings.format_amount(summary.total_income)}",
        f"Total Expenses: {settings.format_amount(summary.total_expenses)}",
        f"Net Savings: {settings.format_amount(summary.net_savings)}",
        "",
    ]
    if not summary.has_expenses:
        lines.append("No expense entries yet.")
        return lines

    lines.append("Expense Breakdown by Category:")
    for item in summary.categories:
        lines.append(
            f"- {item.category}: {settings.format_amount(item.total)} "
            f"({settings.format_percentage(item.percentage)})"
        )
    return lines


def main(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    log_level: int = logging.WARNING,
) -> int:
    """Run one interactive session; command-line arguments are ignored."""
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    store = EntryStore()
    console = ConsoleIO(stdin or sys.stdin, stdout or sys.stdout)
    BudgetShell(console, store, LedgerService(store)).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
