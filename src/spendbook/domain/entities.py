"""Domain model entities for spendbook.

These are pure data classes representing business concepts, independent of
database schema. Import-pipeline values (candidates, row errors, outcomes)
live here too so the storage layer can accept them without depending on the
importer.
"""

from dataclasses import dataclass, asdict
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

TRANSACTION_TYPES = ("debit", "credit")


@dataclass(frozen=True)
class Account:
    """Account domain entity, owned by a single user."""

    id: int
    name: str
    user_id: str
    created_at: datetime
    balance: Decimal = Decimal("0.00")


@dataclass(frozen=True)
class Category:
    """Category domain entity, owned by a single user."""

    id: int
    name: str
    user_id: str
    created_at: datetime


@dataclass(frozen=True)
class Transaction:
    """Persisted transaction domain entity."""

    id: int
    account_id: int
    amount: Decimal
    type: str
    description: Optional[str]
    date: datetime
    category_id: Optional[int]
    created_at: datetime


@dataclass(frozen=True)
class TransactionCandidate:
    """A validated, not-yet-persisted transaction.

    ``amount`` is a fixed-point decimal string with two fractional digits.
    """

    account_id: int
    amount: str
    type: str
    description: Optional[str]
    date: datetime
    category_id: Optional[int] = None


@dataclass(frozen=True)
class RowError:
    """Validation failure tied to a 1-based input row number."""

    row: int
    error: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return f"Row {self.row}: {self.error}"


@dataclass(frozen=True)
class ImportOutcome:
    """Result of a fully committed import batch."""

    imported: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
