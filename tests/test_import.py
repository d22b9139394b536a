"""Tests for CSV import command."""

from datetime import datetime

import pytest

from spendbook.cli.main import cli

USER = "user_1"


@pytest.fixture
def statement_csv(tmp_path):
    """Write a statement CSV and return its path."""

    def write(content, name="statement.csv"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return write


def test_import_successful(cli_runner, cli_args, temp_db, sample_account, statement_csv):
    csv_file = statement_csv(
        "Date,Description,Debit,Credit\n"
        "15-01-2024,Coffee,4.50,\n"
        "16-01-2024,Salary,,2500.00\n"
    )

    result = cli_runner.invoke(
        cli, cli_args + ["import", csv_file, "--account", "Test Account"]
    )

    assert result.exit_code == 0
    assert "Import complete" in result.output
    assert "Imported: 2 transactions" in result.output
    assert len(temp_db.list_transactions(USER)) == 2


def test_import_by_account_id(cli_runner, cli_args, sample_account, statement_csv):
    csv_file = statement_csv("Date,Description,Debit,Credit\n15-01-2024,Coffee,4.50,\n")

    result = cli_runner.invoke(
        cli, cli_args + ["import", csv_file, "--account", str(sample_account.id)]
    )

    assert result.exit_code == 0
    assert "Imported: 1 transactions" in result.output


def test_import_validation_failure_lists_rows(cli_runner, cli_args, temp_db, sample_account, statement_csv):
    """One bad row rejects the whole file."""
    csv_file = statement_csv(
        "Date,Description,Debit,Credit\n"
        "15-01-2024,Coffee,4.50,\n"
        "16-01-2024,Both,1.00,2.00\n"
        "not a date,Mystery,3.00,\n"
    )

    result = cli_runner.invoke(
        cli, cli_args + ["import", csv_file, "--account", "Test Account"]
    )

    assert result.exit_code == 1
    assert "2 rows failed validation" in result.output
    assert "Row 2: Both Debit and Credit cannot have values" in result.output
    assert "Row 3: Invalid date format" in result.output
    assert temp_db.list_transactions(USER) == []


def test_import_unknown_account(cli_runner, cli_args, statement_csv):
    csv_file = statement_csv("Date,Description,Debit,Credit\n15-01-2024,Coffee,4.50,\n")

    result = cli_runner.invoke(cli, cli_args + ["import", csv_file, "--account", "Nope"])

    assert result.exit_code == 1
    assert "not found" in result.output.lower()


def test_import_missing_file(cli_runner, cli_args, sample_account, tmp_path):
    result = cli_runner.invoke(
        cli,
        cli_args + ["import", str(tmp_path / "missing.csv"), "--account", "Test Account"],
    )

    assert result.exit_code != 0


def test_import_header_only(cli_runner, cli_args, sample_account, statement_csv):
    csv_file = statement_csv("Date,Description,Debit,Credit\n")

    result = cli_runner.invoke(
        cli, cli_args + ["import", csv_file, "--account", "Test Account"]
    )

    assert result.exit_code == 1
    assert "No valid transactions to import" in result.output


def test_import_description_timestamp(cli_runner, cli_args, temp_db, sample_account, statement_csv):
    csv_file = statement_csv(
        "Description;Debit;Credit\n"
        "Card payment 05/03/2024 14:30:00;12.50;\n",
    )

    result = cli_runner.invoke(
        cli, cli_args + ["import", csv_file, "--account", "Test Account"]
    )

    assert result.exit_code == 0
    [txn] = temp_db.list_transactions(USER)
    assert txn.date == datetime(2024, 3, 5, 14, 30)
    assert txn.description == "Card payment 05/03/2024 14:30:00"


def test_import_strip_timestamps(cli_runner, cli_args, temp_db, sample_account, statement_csv):
    csv_file = statement_csv(
        "Description,Debit,Credit\n"
        "Card payment 05/03/2024 14:30:00,12.50,\n",
    )

    result = cli_runner.invoke(
        cli,
        cli_args + ["import", csv_file, "--account", "Test Account", "--strip-timestamps"],
    )

    assert result.exit_code == 0
    [txn] = temp_db.list_transactions(USER)
    assert txn.description == "Card payment"
