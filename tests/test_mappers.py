"""Tests for database mappers."""

from datetime import datetime, UTC
from decimal import Decimal

from spendbook.database.models import (
    Account as ORMAccount,
    Category as ORMCategory,
    Transaction as ORMTransaction,
)
from spendbook.database.mappers import (
    account_to_domain,
    candidate_to_orm,
    category_to_domain,
    transaction_to_domain,
)
from spendbook.domain.entities import Account, Category, Transaction, TransactionCandidate


def test_account_to_domain():
    orm_account = ORMAccount(
        id=1,
        name="Checking",
        user_id="u1",
        balance=Decimal("150.25"),
        created_at=datetime.now(UTC),
    )

    domain_account = account_to_domain(orm_account)

    assert isinstance(domain_account, Account)
    assert domain_account.id == 1
    assert domain_account.name == "Checking"
    assert domain_account.user_id == "u1"
    assert domain_account.created_at == orm_account.created_at
    assert domain_account.balance == Decimal("150.25")


def test_category_to_domain():
    orm_category = ORMCategory(id=3, name="Rent", user_id="u1", created_at=datetime.now(UTC))

    domain_category = category_to_domain(orm_category)

    assert isinstance(domain_category, Category)
    assert domain_category.name == "Rent"


def test_transaction_to_domain():
    orm_txn = ORMTransaction(
        id=5,
        account_id=1,
        amount=Decimal("12.50"),
        type="credit",
        description="Refund",
        date=datetime(2024, 3, 1, 10, 0),
        category_id=None,
        created_at=datetime.now(UTC),
    )

    txn = transaction_to_domain(orm_txn)

    assert isinstance(txn, Transaction)
    assert txn.amount == Decimal("12.50")
    assert txn.type == "credit"
    assert txn.date == datetime(2024, 3, 1, 10, 0)


def test_candidate_to_orm_keeps_fixed_point_amount():
    candidate = TransactionCandidate(
        account_id=1,
        amount="1234.50",
        type="debit",
        description=None,
        date=datetime(2024, 1, 1),
    )

    orm_txn = candidate_to_orm(candidate)

    assert orm_txn.amount == Decimal("1234.50")
    assert orm_txn.category_id is None
    assert orm_txn.id is None
