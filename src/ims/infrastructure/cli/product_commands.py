"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from ims.application.add_product import AddProductHandler
from ims.application.show_inventory import ShowInventoryHandler
from ims.application.update_product import UpdateProductHandler
from ims.domain.exceptions import DomainException
from ims.domain.model.value_objects import Money
from ims.infrastructure.bootstrap import product_locks, product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", default="", help="Free-text description.")
@click.option("--category", default="", help="Category.")
@click.option("--price", required=True, help="Unit price (e.g. 15.00).")
@click.option("--quantity", default=0, type=int, show_default=True, help="Opening stock.")
@click.option("--reorder-level", default=0, type=int, show_default=True, help="Reorder threshold.")
def product_add(
    name: str,
    description: str,
    category: str,
    price: str,
    quantity: int,
    reorder_level: int,
) -> None:
    """Add a new product."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            name=name,
            description=description,
            category=category,
            price=price,
            quantity=quantity,
            reorder_level=reorder_level,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added at {Money(product.unit_price)} "
        f"with {product.quantity_in_stock} in stock"
    )


@click.command("list")
def product_list() -> None:
    """List all products."""
    lines = ShowInventoryHandler(product_repo=product_repository()).handle()

    if not lines:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Category':<15} {'Price':>10}")
    click.echo("-" * 54)
    for p in lines:
        click.echo(f"{p.id:<6} {p.name:<20} {p.category:<15} {p.unit_price:>10}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", default="", help="Free-text description.")
@click.option("--category", default="", help="Category.")
@click.option("--price", required=True, help="Unit price (e.g. 29.99).")
@click.option("--reorder-level", required=True, type=int, help="Reorder threshold.")
def product_update(
    product_id: str,
    name: str,
    description: str,
    category: str,
    price: str,
    reorder_level: int,
) -> None:
    """Update a product's details (stock is not changed)."""
    handler = UpdateProductHandler(product_repo=product_repository(), locks=product_locks())

    try:
        handler.handle(
            product_id=product_id,
            name=name,
            description=description,
            category=category,
            price=price,
            reorder_level=reorder_level,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} updated")
