"""CLI helpers for account resolution and error handling."""

from __future__ import annotations

import click
from spendbook.domain.account import AccountService
from spendbook.domain.errors import DomainError
from spendbook.cli.error_handling import handle_domain_error
from spendbook.utils.account_resolver import resolve_account


def resolve_account_or_exit(
    ctx: click.Context, account_service: AccountService, account: str | int
) -> int:
    """Resolve one of the current user's accounts, or exit with a CLI error."""
    try:
        return resolve_account(account_service, ctx.obj["user_id"], account)
    except DomainError as exc:
        handle_domain_error(ctx, exc)
