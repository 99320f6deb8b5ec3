"""Mini README: Entry point CLI for the personal expense tracker.

This script exposes a Typer CLI that plays the part of the app's screens:
adding transactions, listing them newest first, deleting listed rows and
showing the balance card. Settings come from ``EXPENSE_TRACKER_`` environment
variables; see ``expense_tracker.configuration``.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

import typer

from expense_tracker.configuration import get_settings
from expense_tracker.interface import (
    FormValidationError,
    build_transaction,
    display_rows,
    format_amount,
    format_signed_amount,
    store_indices,
)
from expense_tracker.ledger import LedgerStore, TransactionCategory
from expense_tracker.logging_utils import configure_root_logger
from expense_tracker.persistence import build_adapter

cli = typer.Typer(help="Record income and expenses and review your balance.")


def _open_store() -> LedgerStore:
    """Build the configured store and load whatever was saved previously."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    store = LedgerStore(build_adapter(settings))
    store.load_all()
    return store


def _parse_month(month: Optional[str]) -> Optional[datetime]:
    if not month:
        return None
    try:
        return datetime.strptime(month, "%Y-%m")
    except ValueError as error:
        raise typer.BadParameter("Month must look like YYYY-MM.", param_hint="--month") from error


@cli.command()
def add(
    title: str = typer.Argument(..., help="What the money was for."),
    amount: str = typer.Argument(..., help="Amount; ',' or '.' as decimal separator."),
    category: str = typer.Option(
        TransactionCategory.FOOD.value, "--category", "-c", help="Category key, see `categories`."
    ),
    income: bool = typer.Option(False, "--income/--expense", help="Record as income."),
    date: Optional[str] = typer.Option(None, "--date", "-d", help="ISO date, defaults to now."),
) -> None:
    """Record a new transaction."""

    try:
        transaction = build_transaction(
            title=title,
            amount_text=amount,
            category=category,
            occurred_on=date,
            is_income=income,
        )
    except FormValidationError as error:
        raise typer.BadParameter(str(error)) from error

    store = _open_store()
    store.add(transaction)
    typer.echo(
        f"Recorded {transaction.category.glyph} {transaction.title} "
        f"{format_signed_amount(transaction)}"
    )


@cli.command("list")
def list_transactions() -> None:
    """List transactions, newest first."""

    store = _open_store()
    rows = display_rows(store.transactions)
    if not rows:
        typer.echo("No transactions recorded yet.")
        return
    for row in rows:
        transaction = row.transaction
        typer.echo(
            f"{row.position:>3}. {transaction.category.glyph} {transaction.title} "
            f"[{transaction.category.label}] {transaction.occurred_at:%Y-%m-%d} "
            f"{format_signed_amount(transaction)}"
        )


@cli.command()
def delete(
    rows: List[int] = typer.Argument(..., help="Row numbers as printed by `list`."),
) -> None:
    """Delete the listed rows."""

    store = _open_store()
    try:
        indices = store_indices(display_rows(store.transactions), rows)
    except IndexError as error:
        raise typer.BadParameter(str(error), param_hint="ROWS") from error
    removed = store.delete(indices)
    for transaction in removed:
        typer.echo(f"Deleted {transaction.title} {format_signed_amount(transaction)}")


@cli.command()
def summary(
    month: Optional[str] = typer.Option(None, "--month", "-m", help="YYYY-MM, defaults to now."),
) -> None:
    """Show the balance and the month's income and expenses."""

    reference_moment = _parse_month(month)
    store = _open_store()
    figures = store.summary(reference_moment)
    typer.echo(f"Balance:          {format_amount(figures.balance)}")
    typer.echo(f"Monthly income:   {format_amount(figures.monthly_income)}")
    typer.echo(f"Monthly expenses: {format_amount(figures.monthly_expenses)}")


@cli.command()
def categories() -> None:
    """List the available categories."""

    for category in TransactionCategory:
        typer.echo(f"{category.glyph} {category.value:<14} {category.label}")


if __name__ == "__main__":
    cli()
