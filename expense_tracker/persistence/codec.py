"""Mini README: Whole-collection codec for the transaction ledger.

Structure:
    * TransactionRecord - pydantic schema of one stored record.
    * encode_transactions - serialise the full collection to JSON bytes.
    * decode_transactions - parse bytes back into transactions, all or nothing.

The payload is a single JSON array. Categories are written as their
canonical keys and amounts as decimal strings. Records are validated with
``extra="forbid"`` so a payload written by an incompatible schema fails the
whole decode instead of yielding partial data.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Iterable, List

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_serializer,
    field_validator,
)

from ..ledger.models import Transaction, TransactionCategory, as_local_naive
from .base import DecodeError


class TransactionRecord(BaseModel):
    """Serialised form of a ``Transaction``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(..., min_length=1)
    title: str
    amount: Decimal = Field(..., ge=0, allow_inf_nan=False)
    category: TransactionCategory
    date: datetime
    is_income: bool

    @field_validator("date")
    @classmethod
    def _local_date(cls, value: datetime) -> datetime:
        return as_local_naive(value)

    @field_serializer("amount")
    def _serialise_amount(self, amount: Decimal) -> str:
        return str(amount)

    @classmethod
    def from_transaction(cls, transaction: Transaction) -> "TransactionRecord":
        return cls.model_construct(
            id=transaction.transaction_id,
            title=transaction.title,
            amount=transaction.amount,
            category=transaction.category,
            date=transaction.occurred_at,
            is_income=transaction.is_income,
        )

    def to_transaction(self) -> Transaction:
        return Transaction(
            transaction_id=self.id,
            title=self.title,
            amount=self.amount,
            category=self.category,
            occurred_at=self.date,
            is_income=self.is_income,
        )


_RECORDS = TypeAdapter(List[TransactionRecord])


def encode_transactions(transactions: Iterable[Transaction]) -> bytes:
    """Serialise every transaction into one JSON array payload."""

    records = [TransactionRecord.from_transaction(transaction) for transaction in transactions]
    return _RECORDS.dump_json(records)


def decode_transactions(payload: bytes) -> List[Transaction]:
    """Parse a payload produced by ``encode_transactions``.

    Raises ``DecodeError`` for empty, malformed or schema-incompatible data.
    """

    if not payload:
        raise DecodeError("Stored transaction payload is empty")
    try:
        records = _RECORDS.validate_json(payload)
    except ValidationError as error:
        raise DecodeError(f"Stored transaction payload is invalid: {error}") from error
    return [record.to_transaction() for record in records]
