import pytest

from budget_core.models import Expense, Income
from budget_core.services import EntryStore, LedgerService, percentage_of


@pytest.fixture
def store():
    return EntryStore()


@pytest.fixture
def ledger(store):
    return LedgerService(store)


def _scenario(store: EntryStore) -> None:
    store.add_income(Income(date="01/01/2025", amount=1000.00, source="Salary"))
    store.add_expense(Expense(date="01/02/2025", amount=400.00, category="Rent"))
    store.add_expense(Expense(date="01/03/2025", amount=100.00, category="Rent"))
    store.add_expense(Expense(date="01/04/2025", amount=200.00, category="Food"))


def test_empty_store_totals_are_zero(ledger):
    assert ledger.total_income() == 0.0
    assert ledger.total_expenses() == 0.0
    assert ledger.net_savings() == 0.0
    assert ledger.expense_breakdown() == {}


def test_store_preserves_insertion_order(store):
    first = Income(date="01/01/2025", amount=1.0, source="A")
    second = Income(date="01/02/2025", amount=2.0, source="B")
    store.add_income(first)
    store.add_income(second)
    store.add_expense(Expense(date="01/03/2025", amount=3.0, category="C"))

    assert store.incomes() == (first, second)
    assert [e.category for e in store.expenses()] == ["C"]
    assert len(store) == 3


def test_store_views_are_read_only(store):
    store.add_income(Income(date="01/01/2025", amount=5.0, source="Gift"))
    view = store.incomes()
    assert isinstance(view, tuple)
    store.add_income(Income(date="01/02/2025", amount=6.0, source="Gift"))
    # Earlier views do not change after later additions.
    assert len(view) == 1


def test_scenario_totals_and_breakdown(store, ledger):
    _scenario(store)

    assert ledger.total_income() == pytest.approx(1000.00)
    assert ledger.total_expenses() == pytest.approx(700.00)
    assert ledger.net_savings() == pytest.approx(300.00)
    assert ledger.expense_breakdown() == {
        "Rent": pytest.approx(500.00),
        "Food": pytest.approx(200.00),
    }


def test_summary_reports_percentages(store, ledger):
    _scenario(store)

    summary = ledger.summary()
    by_category = {item.category: item for item in summary.categories}

    assert summary.has_expenses
    assert set(by_category) == {"Rent", "Food"}
    assert by_category["Rent"].total == pytest.approx(500.00)
    assert f"{by_category['Rent'].percentage:.1f}" == "71.4"
    assert f"{by_category['Food'].percentage:.1f}" == "28.6"
    assert summary.net_savings == pytest.approx(300.00)


def test_breakdown_is_case_sensitive(store, ledger):
    store.add_expense(Expense(date="01/01/2025", amount=10.0, category="food"))
    store.add_expense(Expense(date="01/01/2025", amount=15.0, category="Food"))

    assert ledger.expense_breakdown() == {"food": 10.0, "Food": 15.0}


def test_net_savings_can_be_negative(store, ledger):
    store.add_income(Income(date="01/01/2025", amount=50.0, source="Tips"))
    store.add_expense(Expense(date="01/02/2025", amount=80.25, category="Travel"))

    assert ledger.net_savings() == pytest.approx(-30.25)
    assert ledger.net_savings() == ledger.total_income() - ledger.total_expenses()


@pytest.mark.parametrize(
    "amounts",
    [
        [0.1, 0.2, 0.3],
        [19.99, 5.01, 1000.5, 0.01],
        [1e-3] * 7,
    ],
)
def test_totals_match_sum_of_amounts(store, ledger, amounts):
    for index, amount in enumerate(amounts):
        store.add_income(Income(date="02/01/2025", amount=amount, source=f"s{index}"))
        store.add_expense(
            Expense(date="02/01/2025", amount=amount, category=f"c{index % 2}")
        )

    assert ledger.total_income() == pytest.approx(sum(amounts))
    assert ledger.total_expenses() == pytest.approx(sum(amounts))
    assert sum(ledger.expense_breakdown().values()) == pytest.approx(ledger.total_expenses())


def test_aggregates_reflect_records_present_at_call_time(store, ledger):
    assert ledger.summary().has_expenses is False
    store.add_expense(Expense(date="03/01/2025", amount=12.5, category="Fun"))
    assert ledger.total_expenses() == pytest.approx(12.5)
    assert ledger.summary().has_expenses is True


@pytest.mark.parametrize("category_total", [0.0, 12.0, -3.0, 1e9])
def test_percentage_of_zero_total_is_zero(category_total):
    assert percentage_of(category_total, 0) == 0.0
    assert LedgerService.percentage_of(category_total, 0.0) == 0.0


def test_percentage_of_positive_total():
    assert percentage_of(25.0, 200.0) == pytest.approx(12.5)

