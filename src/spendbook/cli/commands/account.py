"""Account management commands."""

import click
from spendbook.cli.account_resolution import resolve_account_or_exit
from spendbook.cli.error_handling import handle_domain_error
from spendbook.domain.account import AccountService
from spendbook.domain.errors import DomainError


@click.group()
def account_group():
    """Manage accounts."""
    pass


@account_group.command("create")
@click.argument("name", metavar="ACCOUNT_NAME")
@click.option("--balance", help="Initial balance (e.g., 1500.00 or -250.00); defaults to 0.00")
@click.pass_context
def create_account(ctx, name: str, balance: str | None):
    """Create a new account.

    Examples:
        spendbook account create "Checking"
        spendbook account create "Credit Card" --balance -250.00
    """
    service = AccountService(ctx.obj["db"])

    try:
        account_id = service.create_account(
            user_id=ctx.obj["user_id"], name=name, initial_balance=balance
        )
        click.echo(f"Created account '{name.strip()}' (ID: {account_id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List your accounts."""
    service = AccountService(ctx.obj["db"])

    accounts = service.list_accounts(ctx.obj["user_id"])
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 40)
    for acc in accounts:
        click.echo(f"ID: {acc.id:3d} | {acc.name:<25} | {acc.balance:>15}")


@account_group.command("rename")
@click.argument("account", metavar="ACCOUNT")
@click.argument("new_name", metavar="NEW_NAME")
@click.pass_context
def rename_account(ctx, account: str, new_name: str) -> None:
    """Rename an account.

    ACCOUNT can be an account name or ID.

    Examples:
        spendbook account rename "Checking" "Main Checking"
        spendbook account rename 1 "Savings"
    """
    service = AccountService(ctx.obj["db"])
    account_id = resolve_account_or_exit(ctx, service, account)

    try:
        service.rename_account(account_id=account_id, user_id=ctx.obj["user_id"], name=new_name)
        click.echo(f"Renamed account to '{new_name.strip()}'")
    except DomainError as e:
        handle_domain_error(ctx, e)


@account_group.command("set-balance")
@click.argument("account", metavar="ACCOUNT")
@click.option("--balance", required=True, help="New current balance (e.g., 1234.56 or -80.00)")
@click.pass_context
def set_balance(ctx, account: str, balance: str) -> None:
    """Set the current balance of an account.

    ACCOUNT can be an account name or ID.

    Examples:
        spendbook account set-balance "Checking" --balance 1234.56
        spendbook account set-balance 2 --balance -80.00
    """
    service = AccountService(ctx.obj["db"])
    account_id = resolve_account_or_exit(ctx, service, account)

    try:
        stored = service.set_balance(account_id, ctx.obj["user_id"], balance)
        click.echo(f"Set balance of account {account_id} to {stored}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@account_group.command("delete")
@click.argument("account", metavar="ACCOUNT")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_account(ctx, account: str, yes: bool) -> None:
    """Delete an account.

    ACCOUNT can be an account name or ID. Accounts with transactions cannot
    be deleted; delete the transactions first.
    """
    service = AccountService(ctx.obj["db"])
    user_id = ctx.obj["user_id"]
    account_id = resolve_account_or_exit(ctx, service, account)
    account_obj = service.get_account(account_id, user_id)

    if not yes and not click.confirm(
        f"Are you sure you want to delete account '{account_obj.name}' (ID: {account_id})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_account(account_id, user_id)
        click.echo(f"Deleted account '{account_obj.name}'")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
