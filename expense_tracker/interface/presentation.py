"""Mini README: Display ordering for the transaction list.

Structure:
    * DisplayRow - one listed transaction with its display and store positions.
    * display_rows - newest-first rows built from a store snapshot.
    * store_indices - translate user-facing row numbers back to store positions.
    * format_signed_amount - ``+``/``-`` prefixed amount text.

The store deletes by position in its own insertion order while users pick
rows from the date-sorted list, so the row-to-index translation lives here.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Sequence

from ..ledger.models import Transaction


@dataclass(frozen=True, slots=True)
class DisplayRow:
    """A transaction as shown in the list."""

    position: int
    store_index: int
    transaction: Transaction

    def as_dict(self) -> dict[str, object]:
        transaction = self.transaction
        return {
            "position": self.position,
            "id": transaction.transaction_id,
            "title": transaction.title,
            "category": transaction.category.value,
            "category_label": transaction.category.label,
            "glyph": transaction.category.glyph,
            "amount": format_signed_amount(transaction),
            "date": transaction.occurred_at.isoformat(),
        }


def display_rows(transactions: Sequence[Transaction]) -> List[DisplayRow]:
    """Return rows sorted newest first; ties keep store order. Positions start at 1."""

    ordered = sorted(
        enumerate(transactions),
        key=lambda item: item[1].occurred_at,
        reverse=True,
    )
    return [
        DisplayRow(position=position, store_index=store_index, transaction=transaction)
        for position, (store_index, transaction) in enumerate(ordered, start=1)
    ]


def store_indices(rows: Sequence[DisplayRow], positions: Iterable[int]) -> set[int]:
    """Map 1-based display positions onto store indices."""

    lookup = {row.position: row.store_index for row in rows}
    indices = set()
    for position in positions:
        if position not in lookup:
            raise IndexError(f"No transaction is listed at row {position}")
        indices.add(lookup[position])
    return indices


def format_signed_amount(transaction: Transaction) -> str:
    sign = "+" if transaction.is_income else "-"
    return f"{sign}{format_amount(transaction.amount)}"


def format_amount(amount: Decimal) -> str:
    return f"{amount:,.2f}"
