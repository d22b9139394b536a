"""Account domain service."""

from decimal import Decimal
from typing import Optional
from spendbook.database.base import Database
from spendbook.domain.entities import Account as AccountEntity
from spendbook.domain.errors import (
    ConflictError,
    DependencyError,
    NotFoundError,
    ValidationError,
    account_delete_blocked,
    account_not_found,
    duplicate_name,
)
from spendbook.utils.amount_parser import validate_balance


class AccountService:
    """Service for managing a user's accounts."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def _check_name_available(
        self, user_id: str, name: str, exclude_id: Optional[int] = None
    ) -> None:
        for acc in self.db.list_accounts(user_id):
            if acc.id != exclude_id and acc.name == name:
                raise ConflictError(duplicate_name("Account", name))

    def create_account(
        self, user_id: str, name: str, initial_balance: Optional[str] = None
    ) -> int:
        """Create a new account.

        Args:
            user_id: Owner of the account
            name: Account name
            initial_balance: Optional starting balance, e.g. "1500.00" or
                "-42.10"; defaults to zero

        Returns:
            Account ID

        Raises:
            ValidationError: If the name is blank or the balance is invalid
            ConflictError: If the user already has an account with that name
        """
        name = name.strip()
        if not name:
            raise ValidationError("Account name is required")
        balance = validate_balance(initial_balance)
        self._check_name_available(user_id, name)
        return self.db.create_account(user_id=user_id, name=name, balance=balance)

    def get_account(self, account_id: int, user_id: str) -> Optional[AccountEntity]:
        """Get account by ID, or None if missing or owned by another user."""
        return self.db.get_account_for_user(account_id, user_id)

    def list_accounts(self, user_id: str) -> list[AccountEntity]:
        """List the user's accounts, ordered by name."""
        return self.db.list_accounts(user_id)

    def rename_account(self, account_id: int, user_id: str, name: str) -> None:
        """Rename an account.

        Raises:
            NotFoundError: If the account does not exist for this user
            ConflictError: If the user already has an account with that name
        """
        if self.db.get_account_for_user(account_id, user_id) is None:
            raise NotFoundError(account_not_found(account_id))

        name = name.strip()
        if not name:
            raise ValidationError("Account name is required")
        self._check_name_available(user_id, name, exclude_id=account_id)
        self.db.update_account_name(account_id=account_id, name=name)

    def set_balance(self, account_id: int, user_id: str, balance: str) -> Decimal:
        """Set an account's current balance.

        Returns:
            The stored balance

        Raises:
            NotFoundError: If the account does not exist for this user
            ValidationError: If the balance is invalid or too large
        """
        if self.db.get_account_for_user(account_id, user_id) is None:
            raise NotFoundError(account_not_found(account_id))

        value = validate_balance(balance)
        self.db.update_account_balance(account_id=account_id, balance=value)
        return value

    def delete_account(self, account_id: int, user_id: str) -> None:
        """Delete an account that has no transactions.

        Raises:
            NotFoundError: If the account does not exist for this user
            DependencyError: If the account still has transactions
        """
        if self.db.get_account_for_user(account_id, user_id) is None:
            raise NotFoundError(account_not_found(account_id))

        transaction_count = self.db.get_account_transaction_count(account_id)
        if transaction_count > 0:
            raise DependencyError(account_delete_blocked(account_id, transaction_count))

        self.db.delete_account(account_id)
