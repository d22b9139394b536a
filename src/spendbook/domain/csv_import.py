"""CSV import domain service.

Imports are all-or-nothing: every row is validated first, errors are
collected per row, and only a batch with no errors is written, in a single
insert.
"""

from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Any, Mapping, Sequence

from spendbook.database.base import Database
from spendbook.domain.entities import ImportOutcome, RowError, TransactionCandidate
from spendbook.domain.errors import (
    CONFLICTING_DEBIT_CREDIT,
    DATE_REQUIRED,
    MISSING_AMOUNT,
    NO_DATA,
    NO_VALID_TRANSACTIONS,
    AccountNotFoundError,
    ConflictingDebitCreditError,
    DateRequiredError,
    DomainError,
    ImportFailedError,
    MissingAmountError,
    NoDataError,
    NoValidTransactionsError,
    StorageError,
    ValidationFailedError,
    account_not_found,
)
from spendbook.logging_setup import get_logger
from spendbook.utils.amount_parser import validate_amount
from spendbook.utils.csv_rows import normalize_csv_data, read_csv_rows, resolve_field
from spendbook.utils.date_parser import (
    extract_date_time_from_description,
    parse_date,
    strip_date_time_from_description,
)

logger = get_logger(__name__)


def resolve_transaction_date(date_str: str, description: str) -> datetime:
    """Pick a row's date, preferring the explicit date column.

    A date column that fails to parse falls back to a timestamp at the end of
    the description; if there is none, the date column's error is raised.

    Raises:
        DateRequiredError: If there is no date column value and no timestamp
        InvalidDateFormatError: If the date column is unparseable and there
            is no timestamp
    """
    if date_str and date_str.strip():
        try:
            return parse_date(date_str)
        except DomainError:
            extracted = extract_date_time_from_description(description)
            if extracted is None:
                raise
            return extracted

    extracted = extract_date_time_from_description(description)
    if extracted is None:
        raise DateRequiredError(DATE_REQUIRED)
    return extracted


def build_candidate(
    account_id: int, row: Mapping[str, Any], strip_timestamps: bool = False
) -> TransactionCandidate:
    """Validate one normalized row and build its transaction candidate.

    Raises:
        DomainError: For any row-level problem (date, amount, debit/credit)
    """
    date_str = resolve_field(row, "date")
    description = resolve_field(row, "description")
    debit_str = resolve_field(row, "debit", default="0")
    credit_str = resolve_field(row, "credit", default="0")

    transaction_date = resolve_transaction_date(date_str, description)

    debit_amount = validate_amount(debit_str)
    credit_amount = validate_amount(credit_str)
    debit_value = Decimal(debit_amount)
    credit_value = Decimal(credit_amount)

    if debit_value > 0 and credit_value > 0:
        raise ConflictingDebitCreditError(CONFLICTING_DEBIT_CREDIT)
    if debit_value == 0 and credit_value == 0:
        raise MissingAmountError(MISSING_AMOUNT)

    if strip_timestamps:
        description = strip_date_time_from_description(description)
    else:
        description = description.strip()

    is_debit = debit_value > 0
    return TransactionCandidate(
        account_id=account_id,
        amount=debit_amount if is_debit else credit_amount,
        type="debit" if is_debit else "credit",
        description=description or None,
        date=transaction_date,
        category_id=None,
    )


def validate_rows(
    account_id: int, rows: Sequence[Mapping[str, Any]], strip_timestamps: bool = False
) -> tuple[list[TransactionCandidate], list[RowError]]:
    """Validate every normalized row without stopping at the first failure.

    Returns:
        Tuple of (candidates, row errors); row numbers are 1-based and in
        input order
    """
    candidates: list[TransactionCandidate] = []
    errors: list[RowError] = []

    for index, row in enumerate(rows):
        if not row:
            continue
        try:
            candidates.append(build_candidate(account_id, row, strip_timestamps))
        except DomainError as e:
            errors.append(RowError(row=index + 1, error=str(e)))

    return candidates, errors


class CSVImportService:
    """Service for importing bank statement rows into an account."""

    def __init__(self, db: Database):
        """Initialize CSV import service.

        Args:
            db: Database instance
        """
        self.db = db

    def import_transactions(
        self,
        user_id: str,
        account_id: int,
        csv_rows: Sequence[Any],
        strip_timestamps: bool = False,
    ) -> ImportOutcome:
        """Validate and import a batch of CSV rows.

        Args:
            user_id: User performing the import
            account_id: Target account, which must belong to the user
            csv_rows: Raw rows: a headered matrix or a list of mappings
            strip_timestamps: Remove a trailing "DD/MM/YYYY HH:MM:SS" from
                stored descriptions

        Returns:
            ImportOutcome with the number of imported transactions

        Raises:
            NoDataError: If there are no rows
            AccountNotFoundError: If the account is missing or not the user's
            ValidationFailedError: If any row is invalid; carries all row errors
            NoValidTransactionsError: If no row produced a transaction
            ImportFailedError: If the batch insert failed; nothing was written
        """
        if not csv_rows:
            raise NoDataError(NO_DATA)

        account = self.db.get_account_for_user(account_id, user_id)
        if account is None:
            raise AccountNotFoundError(account_not_found(account_id))

        rows = normalize_csv_data(csv_rows)
        candidates, errors = validate_rows(account.id, rows, strip_timestamps)

        if errors:
            logger.warning(
                "Import into account %s rejected: %d of %d rows invalid",
                account.id,
                len(errors),
                len(rows),
            )
            raise ValidationFailedError(errors)

        if not candidates:
            raise NoValidTransactionsError(NO_VALID_TRANSACTIONS)

        try:
            self.db.create_transactions(candidates)
        except StorageError as e:
            logger.error("Import into account %s failed: %s", account.id, e)
            raise ImportFailedError(str(e)) from e

        logger.info("Imported %d transactions into account %s", len(candidates), account.id)
        return ImportOutcome(imported=len(candidates))

    def import_csv_file(
        self,
        user_id: str,
        account_id: int,
        csv_file_path: str | Path,
        strip_timestamps: bool = False,
    ) -> ImportOutcome:
        """Read a CSV file and import its rows.

        Raises:
            FileNotFoundError: If the CSV file doesn't exist
            DomainError: As raised by import_transactions
        """
        rows = read_csv_rows(csv_file_path)
        return self.import_transactions(
            user_id=user_id,
            account_id=account_id,
            csv_rows=rows,
            strip_timestamps=strip_timestamps,
        )
