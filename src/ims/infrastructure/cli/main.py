import logging

import click

from ims.infrastructure.cli.inventory_commands import inventory_show
from ims.infrastructure.cli.product_commands import product_add, product_list, product_update
from ims.infrastructure.cli.stock_commands import stock_add, stock_history, stock_withdraw


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """IMS — Inventory Management System"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def stock() -> None:
    """Add, withdraw and audit stock."""


@cli.group()
def inventory() -> None:
    """Inspect inventory levels."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
stock.add_command(stock_add)
stock.add_command(stock_history)
stock.add_command(stock_withdraw)
inventory.add_command(inventory_show)
