import click
import uvicorn

from catalog.infrastructure.cli.category_commands import category_list, category_show
from catalog.infrastructure.cli.db_commands import db_init, db_seed
from catalog.infrastructure.cli.product_commands import (
    product_register,
    product_search,
    product_show,
)
from catalog.infrastructure.config import get_settings
from catalog.infrastructure.logging_setup import setup_logging


@click.group()
def cli() -> None:
    """Product Catalog"""
    settings = get_settings()
    setup_logging(settings.service_name, settings.log_level, settings.log_format)


@cli.command("serve")
@click.option("--host", default=None, help="Bind address.")
@click.option("--port", default=None, type=int, help="Bind port.")
@click.option("--reload", is_flag=True, help="Reload on code changes.")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Run the HTTP API."""
    settings = get_settings()
    uvicorn.run(
        "catalog.infrastructure.web.app:create_app",
        factory=True,
        host=host or settings.host,
        port=port or settings.port,
        reload=reload or settings.debug,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


@cli.group()
def db() -> None:
    """Manage the database."""


@cli.group()
def category() -> None:
    """Browse categories."""


@cli.group()
def product() -> None:
    """Register and look up products."""


# Register subcommands
db.add_command(db_init)
db.add_command(db_seed)
category.add_command(category_list)
category.add_command(category_show)
product.add_command(product_register)
product.add_command(product_search)
product.add_command(product_show)
