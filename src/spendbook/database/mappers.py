"""Mapper functions to convert between domain models and SQLAlchemy models."""

from decimal import Decimal

from spendbook.domain import entities as domain
from spendbook.database.models import (
    Account as ORMAccount,
    Category as ORMCategory,
    Transaction as ORMTransaction,
)


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        name=orm_account.name,
        user_id=orm_account.user_id,
        created_at=orm_account.created_at,
        balance=orm_account.balance,
    )


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
        user_id=orm_category.user_id,
        created_at=orm_category.created_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        account_id=orm_transaction.account_id,
        amount=orm_transaction.amount,
        type=orm_transaction.type,
        description=orm_transaction.description,
        date=orm_transaction.date,
        category_id=orm_transaction.category_id,
        created_at=orm_transaction.created_at,
    )


def candidate_to_orm(candidate: domain.TransactionCandidate) -> ORMTransaction:
    """Convert an import candidate into an unsaved SQLAlchemy Transaction."""
    return ORMTransaction(
        account_id=candidate.account_id,
        amount=Decimal(candidate.amount),
        type=candidate.type,
        description=candidate.description,
        date=candidate.date,
        category_id=candidate.category_id,
    )
