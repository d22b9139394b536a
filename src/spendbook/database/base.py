"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import datetime
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from spendbook.domain.entities import (
    Account,
    Category,
    Transaction,
    TransactionCandidate,
)


class Database(ABC):
    """Abstract database interface for spendbook.

    Every account and category lookup is scoped to the owning user.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Account operations
    @abstractmethod
    def create_account(self, user_id: str, name: str, balance: Decimal = Decimal("0.00")) -> int:
        """Create a new account. Returns account ID."""
        pass

    @abstractmethod
    def get_account_for_user(self, account_id: int, user_id: str) -> Optional[Account]:
        """Get account by ID if it belongs to the user."""
        pass

    @abstractmethod
    def list_accounts(self, user_id: str) -> list[Account]:
        """List the user's accounts."""
        pass

    @abstractmethod
    def update_account_name(self, account_id: int, name: str) -> None:
        """Rename an account."""
        pass

    @abstractmethod
    def update_account_balance(self, account_id: int, balance: Decimal) -> None:
        """Set an account's current balance."""
        pass

    @abstractmethod
    def delete_account(self, account_id: int) -> None:
        """Delete an account."""
        pass

    @abstractmethod
    def get_account_transaction_count(self, account_id: int) -> int:
        """Get count of transactions associated with an account."""
        pass

    # Category operations
    @abstractmethod
    def create_category(self, user_id: str, name: str) -> int:
        """Create a category. Returns category ID."""
        pass

    @abstractmethod
    def get_category_for_user(self, category_id: int, user_id: str) -> Optional[Category]:
        """Get category by ID if it belongs to the user."""
        pass

    @abstractmethod
    def get_category_by_name(self, user_id: str, name: str) -> Optional[Category]:
        """Get the user's category by name."""
        pass

    @abstractmethod
    def list_categories(self, user_id: str) -> list[Category]:
        """List the user's categories."""
        pass

    @abstractmethod
    def update_category_name(self, category_id: int, name: str) -> None:
        """Rename a category."""
        pass

    @abstractmethod
    def delete_category(self, category_id: int) -> None:
        """Delete a category, leaving its transactions uncategorized."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        account_id: int,
        amount: Decimal,
        type: str,
        date: datetime,
        description: Optional[str] = None,
        category_id: Optional[int] = None,
    ) -> int:
        """Create a single transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def create_transactions(self, candidates: list[TransactionCandidate]) -> list[int]:
        """Insert all candidates atomically. Returns the new transaction IDs.

        Raises:
            StorageError: If the storage layer rejects any row; nothing is
                written in that case.
        """
        pass

    @abstractmethod
    def get_transaction_for_user(self, transaction_id: int, user_id: str) -> Optional[Transaction]:
        """Get transaction by ID if its account belongs to the user."""
        pass

    @abstractmethod
    def update_transaction(
        self,
        transaction_id: int,
        account_id: Optional[int] = None,
        amount: Optional[Decimal] = None,
        type: Optional[str] = None,
        description: Optional[str] = None,
        date: Optional[datetime] = None,
        category_id: Optional[int] = None,
        update_category: bool = False,
    ) -> None:
        """Update the given transaction fields.

        Args:
            update_category: If True, set category_id even when it is None
                (to clear it)
        """
        pass

    @abstractmethod
    def update_transaction_category(self, transaction_id: int, category_id: Optional[int]) -> None:
        """Update transaction category."""
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        user_id: str,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        account_id: Optional[int] = None,
        search: Optional[str] = None,
    ) -> list[Transaction]:
        """List the user's transactions, newest first.

        Args:
            user_id: Owner of the accounts to include
            start_date: Optional inclusive lower bound
            end_date: Optional inclusive upper bound
            account_id: Optional account ID filter
            search: Optional case-insensitive substring of the description
        """
        pass
