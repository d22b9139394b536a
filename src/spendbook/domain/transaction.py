"""Transaction domain service."""

from typing import Optional
from datetime import datetime
from spendbook.database.base import Database
from spendbook.domain.entities import TRANSACTION_TYPES, Transaction as TransactionEntity
from spendbook.domain.errors import (
    NotFoundError,
    ValidationError,
    account_not_found,
    category_not_found,
    transaction_not_found,
)
from spendbook.utils.amount_parser import parse_amount

MAX_DESCRIPTION_LENGTH = 500


def _clean_description(description: Optional[str]) -> str:
    description = (description or "").strip()
    if not description:
        raise ValidationError("Description is required")
    if len(description) > MAX_DESCRIPTION_LENGTH:
        raise ValidationError(
            f"Description must be less than {MAX_DESCRIPTION_LENGTH} characters"
        )
    return description


def _check_type(type: str) -> None:
    if type not in TRANSACTION_TYPES:
        raise ValidationError(
            f"Invalid transaction type '{type}'. Must be one of: {', '.join(TRANSACTION_TYPES)}"
        )


class TransactionService:
    """Service for manual transaction entry and post-import maintenance."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_transaction(
        self,
        user_id: str,
        account_id: int,
        amount: str,
        type: str,
        description: str,
        date: datetime,
        category_id: Optional[int] = None,
    ) -> int:
        """Create a single transaction.

        Args:
            user_id: Owner of the account
            account_id: Account ID
            amount: Positive amount, e.g. "12.50"
            type: "debit" or "credit"
            description: Required description, at most 500 characters
            date: Transaction date
            category_id: Optional category ID

        Returns:
            Transaction ID

        Raises:
            ValidationError: If amount, type or description is invalid
            NotFoundError: If the account or category is not the user's
        """
        value = parse_amount(amount)

        _check_type(type)
        description = _clean_description(description)

        self._check_references(user_id, account_id, category_id)

        return self.db.create_transaction(
            account_id=account_id,
            amount=value,
            type=type,
            date=date,
            description=description,
            category_id=category_id,
        )

    def _check_references(
        self, user_id: str, account_id: Optional[int], category_id: Optional[int]
    ) -> None:
        if account_id is not None and self.db.get_account_for_user(account_id, user_id) is None:
            raise NotFoundError(account_not_found(account_id))
        if category_id is not None and self.db.get_category_for_user(category_id, user_id) is None:
            raise NotFoundError(category_not_found(category_id))

    def get_transaction(self, user_id: str, transaction_id: int) -> Optional[TransactionEntity]:
        return self.db.get_transaction_for_user(transaction_id, user_id)

    def list_transactions(
        self,
        user_id: str,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        account_id: Optional[int] = None,
        search: Optional[str] = None,
    ) -> list[TransactionEntity]:
        """List the user's transactions, newest first."""
        return self.db.list_transactions(
            user_id=user_id,
            start_date=start_date,
            end_date=end_date,
            account_id=account_id,
            search=search,
        )

    def update_transaction(
        self,
        user_id: str,
        transaction_id: int,
        account_id: Optional[int] = None,
        amount: Optional[str] = None,
        type: Optional[str] = None,
        description: Optional[str] = None,
        date: Optional[datetime] = None,
        category_id: Optional[int] = None,
        clear_category: bool = False,
    ) -> None:
        """Update transaction fields. Fields left as None are unchanged.

        The same rules as create_transaction apply to every given field.

        Args:
            user_id: Owner of the transaction
            transaction_id: Transaction ID to update
            account_id: Optional new account, which must be the user's
            amount: Optional new positive amount
            type: Optional new type, "debit" or "credit"
            description: Optional new description
            date: Optional new date
            category_id: Optional new category, which must be the user's
            clear_category: If True, remove the category

        Raises:
            NotFoundError: If the transaction, account or category is not the user's
            ValidationError: If a given field is invalid, or both category_id
                and clear_category are given
        """
        if self.db.get_transaction_for_user(transaction_id, user_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        if clear_category and category_id is not None:
            raise ValidationError("Cannot set and clear the category at the same time")

        value = parse_amount(amount) if amount is not None else None
        if type is not None:
            _check_type(type)
        if description is not None:
            description = _clean_description(description)
        self._check_references(user_id, account_id, category_id)

        self.db.update_transaction(
            transaction_id=transaction_id,
            account_id=account_id,
            amount=value,
            type=type,
            description=description,
            date=date,
            category_id=category_id,
            update_category=clear_category,
        )

    def update_category(
        self, user_id: str, transaction_id: int, category_name: Optional[str]
    ) -> None:
        """Assign a category by name, or clear it with None.

        Raises:
            NotFoundError: If the transaction or category is not the user's
        """
        if self.db.get_transaction_for_user(transaction_id, user_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))

        category_id = None
        if category_name is not None:
            category = self.db.get_category_by_name(user_id, category_name.strip())
            if category is None:
                raise NotFoundError(category_not_found(category_name))
            category_id = category.id

        self.db.update_transaction_category(transaction_id, category_id)

    def delete_transaction(self, user_id: str, transaction_id: int) -> None:
        if self.db.get_transaction_for_user(transaction_id, user_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        self.db.delete_transaction(transaction_id)
