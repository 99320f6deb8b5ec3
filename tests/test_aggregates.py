"""Mini README: Tests for balance and monthly aggregates.

These tests pin the signed balance arithmetic and the calendar month filter,
including transactions from the same month in another year.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from expense_tracker.ledger import (
    monthly_expenses,
    monthly_income,
    summarise,
    total_balance,
)

REFERENCE = datetime(2024, 6, 15, 12, 0)


def test_total_balance_sums_signed_amounts(make_transaction) -> None:
    transactions = [
        make_transaction(amount="100", is_income=True),
        make_transaction(amount="30", is_income=False),
    ]

    assert total_balance(transactions) == Decimal("70")


def test_total_balance_ignores_dates(make_transaction) -> None:
    transactions = [
        make_transaction(amount="10", is_income=True, occurred_at=datetime(1999, 1, 1)),
        make_transaction(amount="2.5", occurred_at=datetime(2030, 12, 31)),
    ]

    assert total_balance(transactions) == Decimal("7.5")


def test_empty_ledger_aggregates_to_zero() -> None:
    assert total_balance([]) == Decimal("0")
    assert monthly_income([], REFERENCE) == Decimal("0")
    assert monthly_expenses([], REFERENCE) == Decimal("0")


def test_monthly_totals_only_count_the_reference_month(make_transaction) -> None:
    transactions = [
        make_transaction(amount="1000", is_income=True, occurred_at=datetime(2024, 6, 1)),
        make_transaction(amount="250", is_income=True, occurred_at=datetime(2024, 6, 30, 23, 59)),
        make_transaction(amount="99999", is_income=True, occurred_at=datetime(2023, 6, 15)),
        make_transaction(amount="500", is_income=True, occurred_at=datetime(2024, 5, 31)),
        make_transaction(amount="40", occurred_at=datetime(2024, 6, 2)),
        make_transaction(amount="77777", occurred_at=datetime(2023, 6, 2)),
        make_transaction(amount="15", occurred_at=datetime(2024, 7, 1)),
    ]

    assert monthly_income(transactions, REFERENCE) == Decimal("1250")
    assert monthly_expenses(transactions, REFERENCE) == Decimal("40")


def test_monthly_totals_default_to_now(make_transaction) -> None:
    transactions = [
        make_transaction(amount="12", is_income=True),
        make_transaction(amount="5"),
    ]

    assert monthly_income(transactions) == Decimal("12")
    assert monthly_expenses(transactions) == Decimal("5")


def test_summarise_bundles_all_figures(make_transaction) -> None:
    transactions = [
        make_transaction(amount="300", is_income=True, occurred_at=datetime(2024, 6, 3)),
        make_transaction(amount="80", occurred_at=datetime(2024, 6, 4)),
        make_transaction(amount="20", occurred_at=datetime(2024, 1, 4)),
    ]

    summary = summarise(iter(transactions), REFERENCE)

    assert summary.balance == Decimal("200")
    assert summary.monthly_income == Decimal("300")
    assert summary.monthly_expenses == Decimal("80")
    assert summary.as_dict()["balance"] == "200"
    assert summary.as_dict()["reference_moment"] == REFERENCE.isoformat()
