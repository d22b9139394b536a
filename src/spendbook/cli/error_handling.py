"""CLI error handling helpers."""

import click

from spendbook.domain.errors import DomainError, ValidationFailedError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure.

    Import validation failures also list every failing row.
    """
    click.echo(f"Error: {error}", err=True)
    if isinstance(error, ValidationFailedError):
        for row_error in error.row_errors:
            click.echo(f"  {row_error}", err=True)
    ctx.exit(1)
