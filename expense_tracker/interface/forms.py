"""Mini README: Input handling for the add-transaction form.

Structure:
    * FormValidationError - raised for user input that cannot become a transaction.
    * parse_amount - turn user-entered text into a non-negative ``Decimal``.
    * parse_occurred_on - accept ISO dates or timestamps.
    * build_transaction - validate raw form fields and create a ``Transaction``.

The ledger core trusts what it is given, so every check on user-entered text
happens here before a transaction is constructed.
"""

from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from ..ledger.models import Transaction, TransactionCategory, as_local_naive


class FormValidationError(ValueError):
    """Raised when form input cannot be turned into a transaction."""


def parse_amount(text: str) -> Decimal:
    """Parse an amount accepting either ``,`` or ``.`` as decimal separator."""

    cleaned = (text or "").strip().replace(",", ".")
    if not cleaned:
        raise FormValidationError("Amount is required.")
    try:
        amount = Decimal(cleaned)
    except InvalidOperation as error:
        raise FormValidationError(f"Amount '{text}' is not a number.") from error
    if not amount.is_finite():
        raise FormValidationError(f"Amount '{text}' must be a finite number.")
    if amount < 0:
        raise FormValidationError("Amount must not be negative; use the income flag instead.")
    return amount


def parse_occurred_on(value: Union[str, date, datetime, None]) -> datetime:
    """Coerce a form date into a naive local timestamp, defaulting to now."""

    if value is None or value == "":
        return datetime.now()
    if isinstance(value, datetime):
        return as_local_naive(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError as error:
        raise FormValidationError(f"Date '{value}' is not an ISO date (YYYY-MM-DD).") from error
    return as_local_naive(parsed)


def build_transaction(
    *,
    title: str,
    amount_text: str,
    category: Union[str, TransactionCategory],
    occurred_on: Union[str, date, datetime, None] = None,
    is_income: bool = False,
) -> Transaction:
    """Validate the raw form fields and create a new transaction."""

    cleaned_title = (title or "").strip()
    if not cleaned_title:
        raise FormValidationError("Title is required.")
    try:
        resolved_category: Optional[TransactionCategory] = (
            category
            if isinstance(category, TransactionCategory)
            else TransactionCategory.from_str(category)
        )
    except ValueError as error:
        raise FormValidationError(str(error)) from error

    return Transaction.create(
        title=cleaned_title,
        amount=parse_amount(amount_text),
        category=resolved_category,
        occurred_at=parse_occurred_on(occurred_on),
        is_income=is_income,
    )
