"""Utility for resolving account names to IDs."""

from spendbook.domain.account import AccountService
from spendbook.domain.errors import NotFoundError


def resolve_account(account_service: AccountService, user_id: str, account: str | int) -> int:
    """Resolve one of the user's accounts by name or ID.

    Args:
        account_service: AccountService instance
        user_id: Owner of the account
        account: Account name (str) or ID (int or string representation of int)

    Returns:
        Account ID

    Raises:
        NotFoundError: If the user has no such account
    """
    if isinstance(account, int):
        if account_service.get_account(account, user_id) is None:
            raise NotFoundError(f"Account ID {account} not found")
        return account

    # Names take precedence, so an account literally named "2024" still resolves
    for acc in account_service.list_accounts(user_id):
        if acc.name == account:
            return acc.id

    try:
        account_id = int(account)
    except (ValueError, TypeError):
        raise NotFoundError(f"Account '{account}' not found") from None

    if account_service.get_account(account_id, user_id) is None:
        raise NotFoundError(f"Account ID {account_id} not found")
    return account_id
