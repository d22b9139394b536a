"""CSV import command."""

import click
from spendbook.cli.account_resolution import resolve_account_or_exit
from spendbook.cli.error_handling import handle_domain_error
from spendbook.domain.account import AccountService
from spendbook.domain.csv_import import CSVImportService
from spendbook.domain.errors import DomainError


@click.command("import")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--account", required=True, help="Account name or ID to import into")
@click.option(
    "--strip-timestamps",
    is_flag=True,
    help="Remove a trailing 'DD/MM/YYYY HH:MM:SS' from imported descriptions",
)
@click.pass_context
def import_csv(ctx, csv_file: str, account: str, strip_timestamps: bool):
    """Import transactions from a bank statement CSV.

    The file needs a header row with a date column (or a timestamp at the end
    of the description), and Debit and Credit columns. Exactly one of debit or
    credit must be set on each row. Nothing is imported unless every row is
    valid.

    Examples:
        spendbook import statement.csv --account "Checking"
        spendbook import statement.csv --account 1 --strip-timestamps
    """
    db = ctx.obj["db"]
    user_id = ctx.obj["user_id"]
    account_id = resolve_account_or_exit(ctx, AccountService(db), account)
    service = CSVImportService(db)

    try:
        outcome = service.import_csv_file(
            user_id=user_id,
            account_id=account_id,
            csv_file_path=csv_file,
            strip_timestamps=strip_timestamps,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo("\nImport complete:")
    click.echo(f"  Imported: {outcome.imported} transactions")


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_csv)
