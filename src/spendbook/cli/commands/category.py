"""Category management commands."""

import click
from spendbook.cli.error_handling import handle_domain_error
from spendbook.domain.category import CategoryService
from spendbook.domain.errors import DomainError, NotFoundError, category_not_found


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("create")
@click.argument("name")
@click.pass_context
def create_category(ctx, name: str):
    """Create a new category."""
    service = CategoryService(ctx.obj["db"])
    try:
        category_id = service.create_category(user_id=ctx.obj["user_id"], name=name)
        click.echo(f"Created category '{name.strip()}' (ID: {category_id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List your categories."""
    service = CategoryService(ctx.obj["db"])
    categories = service.list_categories(ctx.obj["user_id"])
    if not categories:
        click.echo("No categories found.")
        return

    for cat in categories:
        click.echo(f"ID: {cat.id:3d} | {cat.name}")


def _category_id_or_exit(ctx, service: CategoryService, name: str) -> int:
    category = service.get_category_by_name(ctx.obj["user_id"], name)
    if category is None:
        handle_domain_error(ctx, NotFoundError(category_not_found(name)))
    return category.id


@category_group.command("rename")
@click.argument("name")
@click.argument("new_name")
@click.pass_context
def rename_category(ctx, name: str, new_name: str):
    """Rename a category.

    Examples:
        spendbook category rename "Food" "Groceries"
    """
    service = CategoryService(ctx.obj["db"])
    category_id = _category_id_or_exit(ctx, service, name)

    try:
        service.rename_category(ctx.obj["user_id"], category_id, new_name)
        click.echo(f"Renamed category to '{new_name.strip()}'")
    except DomainError as e:
        handle_domain_error(ctx, e)


@category_group.command("delete")
@click.argument("name")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_category(ctx, name: str, yes: bool):
    """Delete a category. Its transactions become uncategorized."""
    service = CategoryService(ctx.obj["db"])
    category_id = _category_id_or_exit(ctx, service, name)

    if not yes and not click.confirm(f"Are you sure you want to delete category '{name}'?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_category(ctx.obj["user_id"], category_id)
        click.echo(f"Deleted category '{name}'")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
