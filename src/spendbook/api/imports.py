"""Framework-agnostic handler for ``POST /transactions/import``.

A web framework only needs to decode the JSON body, authenticate the user and
serialize the returned ``(status, payload)`` pair.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError

from spendbook.api.responses import (
    Response,
    create_error_response,
    create_success_response,
    extract_error_message,
)
from spendbook.domain.csv_import import CSVImportService
from spendbook.domain.errors import (
    AccountNotFoundError,
    ImportFailedError,
    NoDataError,
    NoValidTransactionsError,
    ValidationFailedError,
)
from spendbook.logging_setup import get_logger

logger = get_logger(__name__)

ACCOUNT_NOT_FOUND_DETAILS = "The selected account does not exist or you don't have access to it"

MIN_ACCOUNT_ID = -(2**63)
MAX_ACCOUNT_ID = 2**63 - 1


class ImportRequest(BaseModel):
    """Request body for a transaction import."""

    model_config = ConfigDict(populate_by_name=True)

    account_id: str = Field(..., alias="accountId", min_length=1)
    data: list[Union[dict[str, Any], list[Any]]]


def _parse_account_id(raw: str) -> Optional[int]:
    try:
        account_id = int(raw.strip())
    except ValueError:
        return None
    # Storage keys are signed 64-bit integers
    if not MIN_ACCOUNT_ID <= account_id <= MAX_ACCOUNT_ID:
        return None
    return account_id


def _field_errors(exc: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
        for err in exc.errors()
    ]


def handle_import_request(
    service: CSVImportService, user_id: Optional[str], body: Any
) -> Response:
    """Run an import request and map the outcome to a status and envelope.

    Args:
        service: Import service bound to the request's database
        user_id: Authenticated user, or None when unauthenticated
        body: Decoded JSON body

    Returns:
        Tuple of (HTTP status code, JSON-serializable envelope)
    """
    if not user_id:
        return create_error_response(
            "Unauthorized", details="Please sign in to import transactions", status=401
        )

    if not isinstance(body, dict):
        return create_error_response(
            "Invalid request body", details="Request body must be a JSON object", status=400
        )

    try:
        request = ImportRequest.model_validate(body)
    except PydanticValidationError as e:
        return create_error_response(
            "Validation failed",
            details="Please check your input and try again",
            status=400,
            errors=_field_errors(e),
        )

    account_id = _parse_account_id(request.account_id)
    if account_id is None:
        return create_error_response(
            "Account not found", details=ACCOUNT_NOT_FOUND_DETAILS, status=404
        )

    try:
        outcome = service.import_transactions(
            user_id=user_id, account_id=account_id, csv_rows=request.data
        )
    except NoDataError:
        return create_error_response(
            "No data to import", details="CSV file appears to be empty", status=400
        )
    except AccountNotFoundError:
        return create_error_response(
            "Account not found", details=ACCOUNT_NOT_FOUND_DETAILS, status=404
        )
    except ValidationFailedError as e:
        return create_error_response(
            "Validation failed",
            details="Some rows failed validation. All transactions must be valid to import.",
            status=400,
            errors=[row_error.to_dict() for row_error in e.row_errors],
        )
    except NoValidTransactionsError:
        return create_error_response(
            "No valid transactions to import",
            details="No valid rows found in the CSV file",
            status=400,
        )
    except ImportFailedError as e:
        return create_error_response(
            "Failed to import transactions", details=e.details, status=500
        )
    except Exception as e:
        logger.exception("Unexpected error importing into account %s", account_id)
        return create_error_response(
            "Internal server error", details=extract_error_message(e), status=500
        )

    return create_success_response(outcome.to_dict(), status=201)
