"""Main CLI entry point."""

import getpass

import click
from spendbook.database.factories import create_sqlite_database
from spendbook.logging_setup import configure_logging

# Import and register all commands at module level
from spendbook.cli.commands import (
    account,
    category,
    import_cmd,
    transaction,
)


def _default_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "default"


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides SPENDBOOK_DB_PATH environment variable)",
    envvar="SPENDBOOK_DB_PATH",
)
@click.option(
    "--user",
    "user_id",
    help="User whose accounts and transactions to work with (defaults to the login name)",
    envvar="SPENDBOOK_USER",
)
@click.option(
    "--log-level",
    help="Logging level, e.g. INFO or DEBUG",
    envvar="SPENDBOOK_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, user_id: str | None, log_level: str | None):
    """Spendbook - personal expense tracking.

    Keep accounts, record transactions and import bank statement CSVs.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.obj["user_id"] = user_id or _default_user()
        ctx.call_on_close(db.disconnect)


# Register all commands
account.register_commands(cli)
category.register_commands(cli)
import_cmd.register_commands(cli)
transaction.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
