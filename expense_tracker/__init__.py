"""Mini README: Core package initialiser for the expense tracker.

Re-exports the ledger store and transaction model so callers can start with
``from expense_tracker import LedgerStore, Transaction``. Subpackages:
``ledger`` (core), ``persistence`` (storage) and ``interface`` (user input
and list presentation).
"""

from .ledger import LedgerStore, Transaction, TransactionCategory
from .logging_utils import get_logger

__version__ = "0.1.0"

__all__ = ["LedgerStore", "Transaction", "TransactionCategory", "get_logger"]
