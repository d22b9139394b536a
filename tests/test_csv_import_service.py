"""Domain tests for the CSV import service."""

from datetime import datetime
from decimal import Decimal

import pytest

from spendbook.domain.csv_import import CSVImportService, resolve_transaction_date
from spendbook.domain.entities import ImportOutcome, RowError
from spendbook.domain.errors import (
    AccountNotFoundError,
    DateRequiredError,
    ImportFailedError,
    InvalidDateFormatError,
    NoDataError,
    NoValidTransactionsError,
    StorageError,
    ValidationFailedError,
)

TEST_USER = "user_1"
OTHER_USER = "user_2"

HEADER = ["date", "debit", "credit", "description"]


def _stored(temp_db, account_id):
    return temp_db.list_transactions(TEST_USER, account_id=account_id)


def test_import_single_debit(import_service, temp_db, sample_account):
    """A headered matrix with one debit row imports one transaction."""
    rows = [HEADER, ["01-01-2024", "100.00", "0", "Groceries"]]

    outcome = import_service.import_transactions(TEST_USER, sample_account.id, rows)

    assert outcome == ImportOutcome(imported=1)
    [txn] = _stored(temp_db, sample_account.id)
    assert txn.type == "debit"
    assert txn.amount == Decimal("100.00")
    assert txn.description == "Groceries"
    assert txn.date == datetime(2024, 1, 1)
    assert txn.category_id is None
    assert txn.account_id == sample_account.id


def test_import_records_with_mixed_header_casing(import_service, temp_db, sample_account):
    """Keyed records are accepted regardless of header casing."""
    rows = [
        {"Date": "02-01-2024", "Description": "Salary", "Debit": "", "Credit": "2,500"},
        {"DATE": "03-01-2024", "DESCRIPTION": "Rent", "DEBIT": "900", "CREDIT": ""},
        {"Txn Date": "04-01-2024", "description": "Coffee", "debit": "3.5"},
    ]

    outcome = import_service.import_transactions(TEST_USER, sample_account.id, rows)

    assert outcome.imported == 3
    stored = {txn.description: txn for txn in _stored(temp_db, sample_account.id)}
    assert stored["Salary"].type == "credit"
    assert stored["Salary"].amount == Decimal("2500.00")
    assert stored["Rent"].type == "debit"
    assert stored["Coffee"].amount == Decimal("3.50")
    assert stored["Coffee"].date == datetime(2024, 1, 4)


def test_import_date_from_description(import_service, temp_db, sample_account):
    """With no date column, the trailing description timestamp is used."""
    rows = [["description", "debit"], ["Some text 05/06/2024 13:45:30", "10"]]

    import_service.import_transactions(TEST_USER, sample_account.id, rows)

    [txn] = _stored(temp_db, sample_account.id)
    assert txn.date == datetime(2024, 6, 5, 13, 45, 30)
    assert txn.description == "Some text 05/06/2024 13:45:30"


def test_import_strip_timestamps(import_service, temp_db, sample_account):
    """The trailing timestamp can be removed from stored descriptions."""
    rows = [["description", "debit"], ["Some text 05/06/2024 13:45:30", "10"]]

    import_service.import_transactions(
        TEST_USER, sample_account.id, rows, strip_timestamps=True
    )

    [txn] = _stored(temp_db, sample_account.id)
    assert txn.description == "Some text"


def test_import_blank_description_is_null(import_service, temp_db, sample_account):
    rows = [HEADER, ["01-01-2024", "1", "", "   "]]

    import_service.import_transactions(TEST_USER, sample_account.id, rows)

    [txn] = _stored(temp_db, sample_account.id)
    assert txn.description is None


def test_conflicting_debit_credit(import_service, temp_db, sample_account):
    """Both sides positive is a row error and nothing is persisted."""
    rows = [HEADER, ["01-01-2024", "50", "20", "Both"]]

    with pytest.raises(ValidationFailedError) as excinfo:
        import_service.import_transactions(TEST_USER, sample_account.id, rows)

    assert excinfo.value.row_errors == [
        RowError(
            row=1,
            error="Both Debit and Credit cannot have values. Only one should have a value.",
        )
    ]
    assert _stored(temp_db, sample_account.id) == []


@pytest.mark.parametrize("debit,credit", [("0", "0"), ("", ""), ("0.00", "")])
def test_missing_amount(import_service, temp_db, sample_account, debit, credit):
    """Both sides zero is a row error, never a silent skip."""
    rows = [HEADER, ["01-01-2024", debit, credit, "Nothing"]]

    with pytest.raises(ValidationFailedError) as excinfo:
        import_service.import_transactions(TEST_USER, sample_account.id, rows)

    assert excinfo.value.row_errors == [
        RowError(row=1, error="Either Debit or Credit must have a value")
    ]


def test_one_bad_row_blocks_whole_batch(import_service, temp_db, sample_account):
    """N valid rows plus one invalid row persist zero transactions."""
    rows = [HEADER] + [
        [f"{day:02d}-01-2024", "10", "", f"Valid {day}"] for day in range(1, 6)
    ]
    rows.append(["06-01-2024", "abc", "", "Broken"])

    with pytest.raises(ValidationFailedError) as excinfo:
        import_service.import_transactions(TEST_USER, sample_account.id, rows)

    assert [e.row for e in excinfo.value.row_errors] == [6]
    assert excinfo.value.row_errors[0].error == "Invalid amount: abc"
    assert _stored(temp_db, sample_account.id) == []


def test_all_row_errors_reported_in_order(import_service, sample_account):
    """Validation continues after a failing row and keeps input order."""
    rows = [
        HEADER,
        ["", "10", "", "No date"],
        ["01-01-2024", "10", "", "Fine"],
        ["bogus", "10", "", "Bad date"],
        ["01-01-2024", "1000000000000", "", "Too big"],
        ["01-01-2024", "-5", "", "Negative"],
    ]

    with pytest.raises(ValidationFailedError) as excinfo:
        import_service.import_transactions(TEST_USER, sample_account.id, rows)

    assert [str(e) for e in excinfo.value.row_errors] == [
        "Row 1: Date is required",
        "Row 3: Invalid date format: bogus",
        "Row 4: Amount exceeds maximum allowed value",
        "Row 5: Invalid amount: -5",
    ]
    assert "4 rows failed validation" in str(excinfo.value)


def test_no_data(import_service, sample_account):
    with pytest.raises(NoDataError):
        import_service.import_transactions(TEST_USER, sample_account.id, [])


def test_header_only_has_no_valid_transactions(import_service, sample_account):
    with pytest.raises(NoValidTransactionsError):
        import_service.import_transactions(TEST_USER, sample_account.id, [HEADER])


def test_unknown_account(import_service):
    with pytest.raises(AccountNotFoundError):
        import_service.import_transactions(TEST_USER, 999, [HEADER])


def test_account_of_other_user(import_service, temp_db, sample_account):
    """Importing into someone else's account is treated as not found."""
    rows = [HEADER, ["01-01-2024", "1", "", "x"]]

    with pytest.raises(AccountNotFoundError):
        import_service.import_transactions(OTHER_USER, sample_account.id, rows)

    assert _stored(temp_db, sample_account.id) == []


def test_account_check_precedes_validation(import_service):
    """A missing account is reported even when the rows are invalid."""
    with pytest.raises(AccountNotFoundError):
        import_service.import_transactions(TEST_USER, 42, [HEADER, ["", "", "", ""]])


def test_storage_failure_becomes_import_failed(temp_db, sample_account, monkeypatch):
    """A storage error is surfaced as ImportFailed with its message."""

    def failing_insert(candidates):
        raise StorageError("disk full")

    monkeypatch.setattr(temp_db, "create_transactions", failing_insert)
    service = CSVImportService(temp_db)

    with pytest.raises(ImportFailedError) as excinfo:
        service.import_transactions(
            TEST_USER, sample_account.id, [HEADER, ["01-01-2024", "1", "", "x"]]
        )

    assert excinfo.value.details == "disk full"


def test_import_csv_file(import_service, temp_db, sample_account, tmp_path):
    """A CSV file on disk is read and imported."""
    csv_path = tmp_path / "statement.csv"
    csv_path.write_text(
        "Txn Date,Description,Debit,Credit\n"
        "15-01-2024,Groceries,\"1,250.00\",\n"
        "16-01-2024,Salary,,3000\n",
        encoding="utf-8",
    )

    outcome = import_service.import_csv_file(TEST_USER, sample_account.id, csv_path)

    assert outcome.imported == 2
    amounts = sorted(txn.amount for txn in _stored(temp_db, sample_account.id))
    assert amounts == [Decimal("1250.00"), Decimal("3000.00")]


class TestResolveTransactionDate:
    """Tests for the explicit-date-first resolution policy."""

    def test_explicit_date_wins_over_description(self):
        result = resolve_transaction_date("01-01-2024", "Shop 05/06/2024 13:45:30")
        assert result == datetime(2024, 1, 1)

    def test_bad_explicit_date_falls_back_to_description(self):
        result = resolve_transaction_date("bogus", "Shop 05/06/2024 13:45:30")
        assert result == datetime(2024, 6, 5, 13, 45, 30)

    def test_bad_explicit_date_without_fallback_keeps_column_error(self):
        with pytest.raises(InvalidDateFormatError):
            resolve_transaction_date("bogus", "Shop")

    @pytest.mark.parametrize("date_str", ["", "   "])
    def test_no_date_anywhere(self, date_str):
        with pytest.raises(DateRequiredError):
            resolve_transaction_date(date_str, "Shop")
