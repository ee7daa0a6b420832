"""CLI commands for the database schema and demo data."""

from __future__ import annotations

import click

from catalog.infrastructure import bootstrap
from catalog.infrastructure.persistence.database import create_tables
from catalog.infrastructure.persistence.seed import seed


@click.command("init")
def db_init() -> None:
    """Create the catalog tables if they do not exist."""
    create_tables(bootstrap.engine())
    click.echo("Tables created.")


@click.command("seed")
def db_seed() -> None:
    """Insert the demo categories and products."""
    engine = bootstrap.engine()
    create_tables(engine)
    categories, products = seed(engine)
    click.echo(f"Seeded {categories} categories and {products} products.")
