"""Mini README: Shared fixtures for the expense tracker tests.

Structure:
    * memory_adapter - adapter over a fresh in-memory backend.
    * store - loaded ``LedgerStore`` using ``memory_adapter``.
    * make_transaction - factory with sensible defaults.
    * isolated_settings - points configuration at a temporary data directory.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest

from expense_tracker.configuration import get_settings
from expense_tracker.ledger import LedgerStore, Transaction, TransactionCategory
from expense_tracker.persistence import MemoryKeyValueStore, PersistenceAdapter


@pytest.fixture
def memory_adapter() -> PersistenceAdapter:
    return PersistenceAdapter(MemoryKeyValueStore())


@pytest.fixture
def store(memory_adapter: PersistenceAdapter) -> LedgerStore:
    ledger = LedgerStore(memory_adapter)
    ledger.load_all()
    return ledger


@pytest.fixture
def make_transaction():
    def factory(
        title: str = "Coffee",
        amount: str = "4.50",
        category: TransactionCategory = TransactionCategory.FOOD,
        occurred_at: datetime | None = None,
        is_income: bool = False,
    ) -> Transaction:
        return Transaction.create(
            title=title,
            amount=Decimal(amount),
            category=category,
            occurred_at=occurred_at or datetime.now(),
            is_income=is_income,
        )

    return factory


@pytest.fixture
def isolated_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("EXPENSE_TRACKER_DATA_DIRECTORY", str(tmp_path / "data"))
    monkeypatch.setenv("EXPENSE_TRACKER_STORAGE_BACKEND", "file")
    monkeypatch.delenv("EXPENSE_TRACKER_STORAGE_KEY", raising=False)
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()
