"""Transaction management commands."""

from datetime import datetime, timedelta

import click
from dateutil.relativedelta import relativedelta
from spendbook.cli.account_resolution import resolve_account_or_exit
from spendbook.cli.error_handling import handle_domain_error
from spendbook.domain.account import AccountService
from spendbook.domain.category import CategoryService
from spendbook.domain.errors import DomainError, NotFoundError, category_not_found
from spendbook.domain.transaction import TransactionService
from spendbook.utils.date_parser import parse_date


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("add")
@click.option("--account", required=True, help="Account name or ID")
@click.option("--amount", required=True, help="Positive amount (e.g., 123.45)")
@click.option(
    "--type",
    "txn_type",
    type=click.Choice(["debit", "credit"]),
    default="debit",
    show_default=True,
    help="Money out (debit) or in (credit)",
)
@click.option("--description", required=True, help="Transaction description")
@click.option(
    "--date", "date_str", help="Transaction date (e.g., 15-01-2024 or 2024-01-15); defaults to now"
)
@click.option("--category", help="Category name")
@click.pass_context
def add_transaction(
    ctx,
    account: str,
    amount: str,
    txn_type: str,
    description: str,
    date_str: str | None,
    category: str | None,
) -> None:
    """Record a transaction manually.

    Examples:
        spendbook transaction add --account Checking --amount 42.10 --description "Groceries"
        spendbook transaction add --account 1 --amount 2500 --type credit --description Salary
    """
    db = ctx.obj["db"]
    user_id = ctx.obj["user_id"]
    account_id = resolve_account_or_exit(ctx, AccountService(db), account)

    try:
        txn_date = parse_date(date_str) if date_str is not None else datetime.now()

        category_id = None
        if category is not None:
            category_obj = CategoryService(db).get_category_by_name(user_id, category)
            if category_obj is None:
                raise NotFoundError(category_not_found(category))
            category_id = category_obj.id

        transaction_id = TransactionService(db).create_transaction(
            user_id=user_id,
            account_id=account_id,
            amount=amount,
            type=txn_type,
            description=description,
            date=txn_date,
            category_id=category_id,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created transaction {transaction_id}")


@transaction_group.command("update")
@click.argument("transaction_id", type=int)
@click.option("--account", help="Move to this account (name or ID)")
@click.option("--amount", help="New positive amount (e.g., 123.45)")
@click.option("--type", "txn_type", type=click.Choice(["debit", "credit"]), help="New type")
@click.option("--description", help="New description")
@click.option("--date", "date_str", help="New date (e.g., 15-01-2024 or 2024-01-15)")
@click.option("--category", help="Category name, or empty string to clear")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: int,
    account: str | None,
    amount: str | None,
    txn_type: str | None,
    description: str | None,
    date_str: str | None,
    category: str | None,
) -> None:
    """Update a transaction.

    Updates only the fields that are provided. Use --category "" to clear the category.

    Examples:
        spendbook transaction update 12 --amount 45.00
        spendbook transaction update 12 --account Savings --type credit
        spendbook transaction update 12 --category ""
    """
    db = ctx.obj["db"]
    user_id = ctx.obj["user_id"]

    account_id = None
    if account is not None:
        account_id = resolve_account_or_exit(ctx, AccountService(db), account)

    try:
        txn_date = parse_date(date_str) if date_str is not None else None

        category_id = None
        clear_category = category == ""
        if category:
            category_obj = CategoryService(db).get_category_by_name(user_id, category)
            if category_obj is None:
                raise NotFoundError(category_not_found(category))
            category_id = category_obj.id

        TransactionService(db).update_transaction(
            user_id=user_id,
            transaction_id=transaction_id,
            account_id=account_id,
            amount=amount,
            type=txn_type,
            description=description,
            date=txn_date,
            category_id=category_id,
            clear_category=clear_category,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Updated transaction {transaction_id}")


@transaction_group.command("list")
@click.option("--account", help="Only this account (name or ID)")
@click.option("--from", "from_str", help="Start date (defaults to one month ago)")
@click.option("--to", "to_str", help="End date (defaults to now)")
@click.option("--search", help="Case-insensitive text to find in descriptions")
@click.pass_context
def list_transactions(
    ctx, account: str | None, from_str: str | None, to_str: str | None, search: str | None
) -> None:
    """List transactions, newest first."""
    db = ctx.obj["db"]
    user_id = ctx.obj["user_id"]

    account_id = None
    if account is not None:
        account_id = resolve_account_or_exit(ctx, AccountService(db), account)

    try:
        end_date = parse_date(to_str) if to_str else datetime.now()
        start_date = parse_date(from_str) if from_str else end_date - relativedelta(months=1)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    # A bare end date covers that whole day
    if to_str and end_date.time() == datetime.min.time():
        end_date = end_date + timedelta(days=1) - timedelta(microseconds=1)

    transactions = TransactionService(db).list_transactions(
        user_id=user_id,
        start_date=start_date,
        end_date=end_date,
        account_id=account_id,
        search=search,
    )
    if not transactions:
        click.echo("No transactions found.")
        return

    for txn in transactions:
        sign = "-" if txn.type == "debit" else "+"
        click.echo(
            f"{txn.id:5d} | {txn.date:%Y-%m-%d %H:%M} | {sign}{txn.amount:>14} | "
            f"{txn.description or ''}"
        )


@transaction_group.command("categorize")
@click.argument("transaction_id", type=int)
@click.argument("category", required=False)
@click.pass_context
def categorize_transaction(ctx, transaction_id: int, category: str | None) -> None:
    """Set a transaction's category, or clear it when CATEGORY is omitted."""
    service = TransactionService(ctx.obj["db"])
    try:
        service.update_category(ctx.obj["user_id"], transaction_id, category)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if category is None:
        click.echo(f"Cleared category of transaction {transaction_id}")
    else:
        click.echo(f"Categorized transaction {transaction_id} as '{category}'")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.pass_context
def delete_transaction(ctx, transaction_id: int) -> None:
    """Delete a transaction."""
    service = TransactionService(ctx.obj["db"])
    try:
        service.delete_transaction(ctx.obj["user_id"], transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
