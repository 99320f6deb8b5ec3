"""Mini README: Aggregates derived from the ledger.

Structure:
    * total_balance - all-time signed sum.
    * monthly_income / monthly_expenses - calendar month totals.
    * LedgerSummary / summarise - the three figures bundled for display.

Every function is pure and recomputes from the transactions it is handed.
A month matches when both the calendar year and month number of the
transaction's ``occurred_at`` equal those of the reference moment.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Dict, Iterable, Optional

from .models import Transaction

ZERO = Decimal("0")


def total_balance(transactions: Iterable[Transaction]) -> Decimal:
    """Sum income as credits and expenses as debits across all time."""

    return sum((transaction.signed_amount for transaction in transactions), ZERO)


def _in_month(transaction: Transaction, reference_moment: datetime) -> bool:
    occurred_at = transaction.occurred_at
    return (
        occurred_at.year == reference_moment.year
        and occurred_at.month == reference_moment.month
    )


def _monthly_total(
    transactions: Iterable[Transaction],
    reference_moment: Optional[datetime],
    *,
    is_income: bool,
) -> Decimal:
    reference_moment = reference_moment or datetime.now()
    return sum(
        (
            transaction.amount
            for transaction in transactions
            if transaction.is_income == is_income and _in_month(transaction, reference_moment)
        ),
        ZERO,
    )


def monthly_income(
    transactions: Iterable[Transaction], reference_moment: Optional[datetime] = None
) -> Decimal:
    """Total income recorded in the reference moment's calendar month."""

    return _monthly_total(transactions, reference_moment, is_income=True)


def monthly_expenses(
    transactions: Iterable[Transaction], reference_moment: Optional[datetime] = None
) -> Decimal:
    """Total expenses recorded in the reference moment's calendar month."""

    return _monthly_total(transactions, reference_moment, is_income=False)


@dataclass(frozen=True, slots=True)
class LedgerSummary:
    """Balance card figures."""

    balance: Decimal
    monthly_income: Decimal
    monthly_expenses: Decimal
    reference_moment: datetime

    def as_dict(self) -> Dict[str, object]:
        return {
            "balance": str(self.balance),
            "monthly_income": str(self.monthly_income),
            "monthly_expenses": str(self.monthly_expenses),
            "reference_moment": self.reference_moment.isoformat(),
        }


def summarise(
    transactions: Iterable[Transaction], reference_moment: Optional[datetime] = None
) -> LedgerSummary:
    """Compute the balance and month totals over one snapshot."""

    snapshot = list(transactions)
    reference_moment = reference_moment or datetime.now()
    return LedgerSummary(
        balance=total_balance(snapshot),
        monthly_income=monthly_income(snapshot, reference_moment),
        monthly_expenses=monthly_expenses(snapshot, reference_moment),
        reference_moment=reference_moment,
    )
