"""Shared domain error messages and error types."""

from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling. ``code`` is a stable,
    machine-readable name for the failure.
    """

    code = "DomainError"


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""

    code = "ValidationError"


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""

    code = "NotFound"


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""

    code = "Conflict"


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""

    code = "Dependency"


class StorageError(DomainError):
    """The storage layer rejected a write."""

    code = "StorageError"


# Import pipeline errors


class NoDataError(ValidationError):
    code = "NoData"


class AccountNotFoundError(NotFoundError):
    code = "AccountNotFound"


class DateRequiredError(ValidationError):
    code = "DateRequired"


class InvalidDateFormatError(ValidationError):
    code = "InvalidDateFormat"


class InvalidAmountError(ValidationError):
    code = "InvalidAmount"


class AmountExceedsMaximumError(ValidationError):
    code = "AmountExceedsMaximum"


class ConflictingDebitCreditError(ValidationError):
    code = "ConflictingDebitCredit"


class MissingAmountError(ValidationError):
    code = "MissingAmount"


class ValidationFailedError(ValidationError):
    """One or more rows of an import batch failed validation.

    Carries every row error so callers can report them all at once.
    """

    code = "ValidationFailed"

    def __init__(self, row_errors: list, message: Optional[str] = None):
        self.row_errors = list(row_errors)
        super().__init__(message or validation_failed(len(self.row_errors)))


class NoValidTransactionsError(ValidationError):
    code = "NoValidTransactions"


class ImportFailedError(DomainError):
    """Persisting an import batch failed; nothing was written."""

    code = "ImportFailed"

    def __init__(self, details: str):
        self.details = details
        super().__init__(f"Failed to import transactions: {details}")


def account_not_found(account_id: int) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def category_not_found(category: int | str) -> str:
    """Return message for missing category by ID or name."""
    if isinstance(category, int):
        return f"Category {category} not found"
    return f"Category '{category}' not found"


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def duplicate_name(kind: str, name: str) -> str:
    """Return message for a per-user name collision."""
    return f"{kind} with name '{name}' already exists"


def account_delete_blocked(account_id: int, transaction_count: int) -> str:
    """Return message when account still has transactions."""
    return (
        f"Cannot delete account {account_id}: it has {transaction_count} "
        f"transaction{'s' if transaction_count != 1 else ''}. "
        "Please delete them first."
    )


def invalid_amount(value: object) -> str:
    return f"Invalid amount: {value}"


AMOUNT_EXCEEDS_MAXIMUM = "Amount exceeds maximum allowed value"
INVALID_BALANCE = "Balance must be a valid number"
BALANCE_EXCEEDS_MAXIMUM = "Balance exceeds maximum allowed value"
DATE_REQUIRED = "Date is required"
DATE_EMPTY = "Date cannot be empty"
CONFLICTING_DEBIT_CREDIT = (
    "Both Debit and Credit cannot have values. Only one should have a value."
)
MISSING_AMOUNT = "Either Debit or Credit must have a value"
NO_DATA = "No data to import: CSV file appears to be empty"
NO_VALID_TRANSACTIONS = "No valid transactions to import: no valid rows found in the CSV file"


def invalid_date_format(value: object) -> str:
    return f"Invalid date format: {value}"


def validation_failed(error_count: int) -> str:
    """Return summary message for a rejected import batch."""
    return (
        f"Validation failed: {error_count} row{'s' if error_count != 1 else ''} "
        "failed validation. All transactions must be valid to import."
    )
