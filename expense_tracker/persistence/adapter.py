"""Mini README: Persistence adapter used by the ledger store.

Structure:
    * PersistenceAdapter - codec plus backend under one fixed storage key.
    * build_adapter - wire an adapter from ``ExpenseTrackerSettings``.

Both adapter calls return a ``PersistenceResult`` and never raise for
storage or decoding problems; the caller decides what a failure means.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..configuration import ExpenseTrackerSettings, get_settings
from ..ledger.models import Transaction
from ..logging_utils import get_logger
from .base import KeyValueStore, MissingDataError, PersistenceError, PersistenceResult
from .codec import decode_transactions, encode_transactions
from .registry import REGISTRY

LOGGER = get_logger(__name__)

DEFAULT_STORAGE_KEY = "SavedTransactions"


class PersistenceAdapter:
    """Save and load the whole transaction collection as one payload."""

    def __init__(self, backend: KeyValueStore, key: str = DEFAULT_STORAGE_KEY) -> None:
        self.backend = backend
        self.key = key

    def save(self, transactions: Iterable[Transaction]) -> PersistenceResult[int]:
        """Write every transaction; the result value is the payload size."""

        try:
            payload = encode_transactions(transactions)
            self.backend.set(self.key, payload)
        except PersistenceError as error:
            return PersistenceResult.failure(error)
        return PersistenceResult.success(len(payload))

    def load(self) -> PersistenceResult[List[Transaction]]:
        """Read and decode the stored collection."""

        try:
            payload = self.backend.get(self.key)
            if payload is None:
                raise MissingDataError(f"No transactions stored under '{self.key}'")
            transactions = decode_transactions(payload)
        except PersistenceError as error:
            return PersistenceResult.failure(error)
        return PersistenceResult.success(transactions)


def build_adapter(settings: Optional[ExpenseTrackerSettings] = None) -> PersistenceAdapter:
    """Create an adapter for the configured backend and storage key."""

    settings = settings or get_settings()
    if settings.storage_backend == "file":
        backend = REGISTRY.create("file", directory=settings.data_directory)
    else:
        backend = REGISTRY.create(settings.storage_backend)
    LOGGER.debug("Persistence adapter using %s", backend.metadata())
    return PersistenceAdapter(backend, key=settings.storage_key)
