"""Mini README: Authoritative in-memory ledger kept in sync with storage.

Structure:
    * LedgerStore - ordered transaction list with add/delete/load and subscribers.

The store keeps transactions in the order they were added; date ordering is a
presentation concern. Every mutation saves the complete collection through
the persistence adapter and then notifies subscribers with a fresh snapshot.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Callable, Iterable, Iterator, List, Optional, Tuple

from ..logging_utils import get_logger
from .aggregates import LedgerSummary, summarise
from .models import Transaction

if TYPE_CHECKING:
    from ..persistence.adapter import PersistenceAdapter

LOGGER = get_logger(__name__)

Snapshot = Tuple[Transaction, ...]
Subscriber = Callable[[Snapshot], None]


class LedgerStore:
    """Own the ledger's transactions and persist them after every change."""

    def __init__(self, adapter: "PersistenceAdapter") -> None:
        self._adapter = adapter
        self._transactions: List[Transaction] = []
        self._subscribers: List[Subscriber] = []

    @property
    def transactions(self) -> Snapshot:
        """Snapshot of the ledger in store order."""

        return tuple(self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.transactions)

    def get(self, transaction_id: str) -> Transaction:
        """Retrieve a transaction by identifier."""

        for transaction in self._transactions:
            if transaction.transaction_id == transaction_id:
                return transaction
        raise KeyError(f"Transaction {transaction_id} not found")

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback`` for snapshots; returns a function that unsubscribes it."""

        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def load_all(self) -> Snapshot:
        """Replace the ledger with the stored collection, or empty it if none can be read."""

        result = self._adapter.load()
        if result.ok:
            self._transactions = list(result.value or [])
            LOGGER.debug("Loaded %s transactions from storage", len(self._transactions))
        else:
            self._transactions = []
            LOGGER.debug("Starting with an empty ledger: %s", result.error)
        self._notify()
        return self.transactions

    def add(self, transaction: Transaction) -> None:
        """Append a transaction and save the whole ledger."""

        self._transactions.append(transaction)
        LOGGER.info("Added transaction %s (%s)", transaction.transaction_id, transaction.title)
        self._save()
        self._notify()

    def delete(self, indices: Iterable[int]) -> List[Transaction]:
        """Remove the transactions at the given store positions in one step.

        Positions refer to the current store order, not to any sorted display.
        Out-of-range and negative positions are ignored.
        """

        requested = set(indices)
        valid = {index for index in requested if 0 <= index < len(self._transactions)}
        ignored = requested - valid
        if ignored:
            LOGGER.debug("Ignoring out-of-range positions %s", sorted(ignored))

        removed = [self._transactions[index] for index in sorted(valid)]
        self._transactions = [
            transaction
            for index, transaction in enumerate(self._transactions)
            if index not in valid
        ]
        LOGGER.info("Deleted %s transactions", len(removed))
        self._save()
        self._notify()
        return removed

    def summary(self, reference_moment: Optional[datetime] = None) -> LedgerSummary:
        """Balance and month totals over the current snapshot."""

        return summarise(self._transactions, reference_moment)

    def _save(self) -> None:
        result = self._adapter.save(self._transactions)
        # Accepted data-loss risk: the error is discarded, memory stays
        # authoritative and unsaved changes die with the process.
        if not result.ok:
            LOGGER.warning("Ledger save failed, continuing in memory: %s", result.error)

    def _notify(self) -> None:
        snapshot = self.transactions
        for callback in list(self._subscribers):
            callback(snapshot)
