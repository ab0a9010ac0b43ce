"""CLI commands for inventory reporting."""

from __future__ import annotations

import click

from ims.application.show_inventory import ShowInventoryHandler
from ims.infrastructure.bootstrap import product_repository


@click.command("show")
@click.option("--low-stock", is_flag=True, help="Only products at or below their reorder level.")
def inventory_show(low_stock: bool) -> None:
    """Show current inventory levels."""
    handler = ShowInventoryHandler(product_repo=product_repository())
    lines = handler.handle(low_stock_only=low_stock)

    if not lines:
        click.echo("No low-stock products." if low_stock else "No inventory records found.")
        return

    click.echo(f"{'Product':<20} {'In stock':>8} {'Reorder':>8} {'Value':>12}")
    click.echo("-" * 56)
    for line in lines:
        flag = "LOW" if line.low_stock else ""
        click.echo(
            f"{line.name:<20} {line.quantity_in_stock:>8} {line.reorder_level:>8} "
            f"{line.stock_value:>12}  {flag}"
        )
