"""Mini README: End-to-end tests for the Typer CLI.

Each test points the configuration at a temporary data directory, so the
commands exercise the file backend exactly as a user session would.
"""

from __future__ import annotations

import json
from datetime import datetime

from typer.testing import CliRunner

from main_expense_tracker import cli

runner = CliRunner()


def test_add_list_delete_and_summary(isolated_settings) -> None:
    month = datetime.now().strftime("%Y-%m")
    today = datetime.now().strftime("%Y-%m-%d")

    result = runner.invoke(cli, ["add", "Groceries", "5000", "--category", "food", "--date", today])
    assert result.exit_code == 0, result.output
    assert "Groceries" in result.output

    result = runner.invoke(
        cli, ["add", "Paycheck", "200000", "-c", "salary", "--income", "--date", today]
    )
    assert result.exit_code == 0, result.output

    result = runner.invoke(cli, ["summary", "--month", month])
    assert result.exit_code == 0, result.output
    assert "195,000.00" in result.output
    assert "200,000.00" in result.output
    assert "5,000.00" in result.output

    result = runner.invoke(cli, ["list"])
    assert result.exit_code == 0, result.output
    lines = [line for line in result.output.splitlines() if line.strip()]
    groceries_row = next(line for line in lines if "Groceries" in line).split(".")[0].strip()

    result = runner.invoke(cli, ["delete", groceries_row])
    assert result.exit_code == 0, result.output
    assert "Deleted Groceries" in result.output

    result = runner.invoke(cli, ["summary", "--month", month])
    assert "Monthly expenses: 0.00" in result.output
    assert (isolated_settings.data_directory / "SavedTransactions.json").exists()


def test_add_rejects_invalid_amount(isolated_settings) -> None:
    result = runner.invoke(cli, ["add", "Lunch", "twelve"])

    assert result.exit_code != 0
    assert not (isolated_settings.data_directory / "SavedTransactions.json").exists()


def test_delete_unknown_row_fails(isolated_settings) -> None:
    runner.invoke(cli, ["add", "Taxi", "18,5", "-c", "transport"])

    result = runner.invoke(cli, ["delete", "7"])

    assert result.exit_code != 0


def test_list_with_corrupt_storage_starts_empty(isolated_settings) -> None:
    (isolated_settings.data_directory / "SavedTransactions.json").write_bytes(b"\x00garbage")

    result = runner.invoke(cli, ["list"])

    assert result.exit_code == 0, result.output
    assert "No transactions recorded yet." in result.output


def test_summary_rejects_bad_month(isolated_settings) -> None:
    result = runner.invoke(cli, ["summary", "--month", "June"])

    assert result.exit_code != 0


def test_categories_lists_every_key() -> None:
    result = runner.invoke(cli, ["categories"])

    assert result.exit_code == 0
    for key in ("food", "transport", "entertainment", "shopping", "salary", "other"):
        assert key in result.output


def test_offset_dates_can_be_listed_and_deleted(isolated_settings) -> None:
    result = runner.invoke(cli, ["add", "Local", "1", "--date", "2024-06-01"])
    assert result.exit_code == 0, result.output
    result = runner.invoke(cli, ["add", "Abroad", "2", "--date", "2024-06-02T10:00:00+02:00"])
    assert result.exit_code == 0, result.output

    result = runner.invoke(cli, ["list"])
    assert result.exit_code == 0, result.output
    assert "Local" in result.output
    assert "Abroad" in result.output

    result = runner.invoke(cli, ["delete", "1", "2"])
    assert result.exit_code == 0, result.output

    result = runner.invoke(cli, ["list"])
    assert "No transactions recorded yet." in result.output


def test_list_tolerates_stored_epoch_dates(isolated_settings) -> None:
    records = [
        {"id": "a", "title": "Epoch", "amount": "1", "category": "other",
         "date": 0, "is_income": False},
        {"id": "b", "title": "Local", "amount": "2", "category": "food",
         "date": "2024-06-01T12:00:00", "is_income": True},
    ]
    (isolated_settings.data_directory / "SavedTransactions.json").write_text(json.dumps(records))

    result = runner.invoke(cli, ["list"])

    assert result.exit_code == 0, result.output
    assert "Epoch" in result.output
    assert "Local" in result.output
