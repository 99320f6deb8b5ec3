"""Mini README: Transaction domain model for the personal ledger.

Structure:
    * CategoryMetadata - display label and glyph attached to a category.
    * TransactionCategory - closed enum of the supported categories.
    * Transaction - immutable ledger entry.

Amounts are stored as non-negative ``Decimal`` magnitudes; whether an entry
credits or debits the balance is carried by ``is_income`` alone.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Dict, Optional


@dataclass(frozen=True, slots=True)
class CategoryMetadata:
    """Presentation details for a category."""

    label: str
    glyph: str


class TransactionCategory(str, Enum):
    """Enumerate the fixed set of transaction categories."""

    FOOD = "food"
    TRANSPORT = "transport"
    ENTERTAINMENT = "entertainment"
    SHOPPING = "shopping"
    SALARY = "salary"
    OTHER = "other"

    @classmethod
    def from_str(cls, value: str) -> "TransactionCategory":
        """Coerce arbitrary casing into a valid category."""

        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported transaction category: {value}") from error

    @property
    def label(self) -> str:
        return CATEGORY_METADATA[self].label

    @property
    def glyph(self) -> str:
        return CATEGORY_METADATA[self].glyph


CATEGORY_METADATA: Dict[TransactionCategory, CategoryMetadata] = {
    TransactionCategory.FOOD: CategoryMetadata(label="Food", glyph="🍕"),
    TransactionCategory.TRANSPORT: CategoryMetadata(label="Transport", glyph="🚗"),
    TransactionCategory.ENTERTAINMENT: CategoryMetadata(label="Entertainment", glyph="🎬"),
    TransactionCategory.SHOPPING: CategoryMetadata(label="Shopping", glyph="🛍️"),
    TransactionCategory.SALARY: CategoryMetadata(label="Salary", glyph="💰"),
    TransactionCategory.OTHER: CategoryMetadata(label="Other", glyph="📝"),
}


def as_local_naive(moment: datetime) -> datetime:
    """Drop any UTC offset, converting to the local wall clock first."""

    if moment.tzinfo is None or moment.utcoffset() is None:
        return moment.replace(tzinfo=None)
    return moment.astimezone().replace(tzinfo=None)


def new_transaction_id() -> str:
    """Generate an opaque identifier that is never reused."""

    return uuid.uuid4().hex


@dataclass(frozen=True, slots=True)
class Transaction:
    """A single recorded income or expense."""

    transaction_id: str
    title: str
    amount: Decimal
    category: TransactionCategory
    occurred_at: datetime
    is_income: bool

    @classmethod
    def create(
        cls,
        *,
        title: str,
        amount: Decimal,
        category: TransactionCategory,
        occurred_at: Optional[datetime] = None,
        is_income: bool = False,
    ) -> "Transaction":
        """Build a new transaction with a freshly generated identifier."""

        return cls(
            transaction_id=new_transaction_id(),
            title=title,
            amount=amount if isinstance(amount, Decimal) else Decimal(str(amount)),
            category=category,
            occurred_at=as_local_naive(occurred_at or datetime.now()),
            is_income=is_income,
        )

    @property
    def signed_amount(self) -> Decimal:
        """Amount with the sign applied to the balance."""

        return self.amount if self.is_income else -self.amount
