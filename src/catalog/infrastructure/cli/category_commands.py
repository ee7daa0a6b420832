"""CLI commands for categories."""

from __future__ import annotations

import click

from catalog.application.category_queries import ListCategoriesHandler, ShowCategoryHandler
from catalog.domain.exceptions import CatalogError
from catalog.infrastructure.bootstrap import unit_of_work_factory


@click.command("list")
def category_list() -> None:
    """List all categories."""
    handler = ListCategoriesHandler(unit_of_work_factory())

    try:
        categories = handler.handle()
    except CatalogError as exc:
        raise click.ClickException(exc.message)

    if not categories:
        click.echo("No categories found.")
        return

    click.echo(f"{'ID':<38} {'Name':<20}")
    click.echo("-" * 58)
    for c in categories:
        click.echo(f"{c.id:<38} {c.name:<20}")


@click.command("show")
@click.argument("category_id")
def category_show(category_id: str) -> None:
    """Show one category by its UUID."""
    handler = ShowCategoryHandler(unit_of_work_factory())

    try:
        category = handler.handle(category_id)
    except CatalogError as exc:
        raise click.ClickException(exc.message)

    click.echo(f"{category.id}  {category.name}")
