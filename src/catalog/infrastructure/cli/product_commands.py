"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from catalog.application.dto import CategoryDTO, ProductDTO, StockDTO
from catalog.application.register_product import RegisterProductHandler
from catalog.application.search_product import (
    SearchProductByNameHandler,
    ShowProductHandler,
)
from catalog.domain.exceptions import CatalogError
from catalog.infrastructure.bootstrap import unit_of_work_factory


def _echo_product(dto: ProductDTO) -> None:
    click.echo(f"Product  {dto.id}")
    click.echo(f"  Name:     {dto.name}")
    click.echo(f"  Price:    {dto.price}")
    if dto.category is not None:
        click.echo(f"  Category: {dto.category.name} ({dto.category.id})")
    if dto.stock is not None:
        click.echo(f"  Stock:    {dto.stock.quantity} ({dto.stock.id})")


@click.command("register")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, type=int, help="Unit price (50-10000).")
@click.option("--category-id", required=True, help="Category UUID.")
@click.option("--stock", "quantity", required=True, type=int, help="Initial stock (0-100).")
def product_register(name: str, price: int, category_id: str, quantity: int) -> None:
    """Register a new product with its initial stock."""
    handler = RegisterProductHandler(unit_of_work_factory())
    dto = ProductDTO(
        id=None,
        name=name,
        price=price,
        category=CategoryDTO(id=category_id, name=None),
        stock=StockDTO(id=None, quantity=quantity),
    )

    try:
        created = handler.handle(dto)
    except CatalogError as exc:
        raise click.ClickException(exc.message)

    _echo_product(created)


@click.command("search")
@click.argument("name")
def product_search(name: str) -> None:
    """Find a product by its exact name."""
    handler = SearchProductByNameHandler(unit_of_work_factory())

    try:
        dto = handler.handle(name)
    except CatalogError as exc:
        raise click.ClickException(exc.message)

    _echo_product(dto)


@click.command("show")
@click.argument("product_id")
def product_show(product_id: str) -> None:
    """Show a product by its UUID."""
    handler = ShowProductHandler(unit_of_work_factory())

    try:
        dto = handler.handle(product_id)
    except CatalogError as exc:
        raise click.ClickException(exc.message)

    _echo_product(dto)
