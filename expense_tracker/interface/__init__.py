"""Mini README: User-facing layer for the expense tracker.

Exports form parsing and list presentation helpers used by the Typer CLI in
``main_expense_tracker``. Nothing here is needed by the ledger core itself.
"""

from .forms import FormValidationError, build_transaction, parse_amount, parse_occurred_on
from .presentation import DisplayRow, display_rows, format_amount, format_signed_amount, store_indices

__all__ = [
    "DisplayRow",
    "FormValidationError",
    "build_transaction",
    "display_rows",
    "format_amount",
    "format_signed_amount",
    "parse_amount",
    "parse_occurred_on",
    "store_indices",
]
