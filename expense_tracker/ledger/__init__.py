"""Mini README: Personal ledger core.

``models`` defines transactions and categories, ``store`` owns the ordered
collection and its persistence, and ``aggregates`` derives the balance and
monthly totals shown to the user.
"""

from .aggregates import (
    LedgerSummary,
    monthly_expenses,
    monthly_income,
    summarise,
    total_balance,
)
from .models import CATEGORY_METADATA, CategoryMetadata, Transaction, TransactionCategory
from .store import LedgerStore

__all__ = [
    "CATEGORY_METADATA",
    "CategoryMetadata",
    "LedgerStore",
    "LedgerSummary",
    "Transaction",
    "TransactionCategory",
    "monthly_expenses",
    "monthly_income",
    "summarise",
    "total_balance",
]
