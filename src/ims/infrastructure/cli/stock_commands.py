"""CLI commands for stock movements."""

from __future__ import annotations

import click

from ims.application.add_stock import AddStockHandler
from ims.application.show_transactions import ShowTransactionsHandler
from ims.application.withdraw_stock import WithdrawStockHandler
from ims.domain.exceptions import DomainException
from ims.infrastructure.bootstrap import product_locks, product_repository


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units received.")
@click.option("--notes", default="", help="Optional note stored with the transaction.")
def stock_add(product_id: str, quantity: int, notes: str) -> None:
    """Add stock to a product."""
    handler = AddStockHandler(product_repo=product_repository(), locks=product_locks())

    try:
        new_quantity = handler.handle(product_id=product_id, quantity=quantity, notes=notes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Added {quantity} to product #{product_id}, now {new_quantity} in stock")


@click.command("withdraw")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units taken out.")
@click.option("--notes", default="", help="Optional note stored with the transaction.")
def stock_withdraw(product_id: str, quantity: int, notes: str) -> None:
    """Withdraw stock from a product."""
    handler = WithdrawStockHandler(product_repo=product_repository(), locks=product_locks())

    try:
        result = handler.handle(product_id=product_id, quantity=quantity, notes=notes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.succeeded:
        raise click.ClickException(
            f"Insufficient stock for product #{product_id} "
            f"(requested {result.requested}, have {result.quantity_in_stock})"
        )

    click.echo(
        f"Withdrew {quantity} from product #{product_id}, "
        f"now {result.quantity_in_stock} in stock"
    )


@click.command("history")
@click.option("--id", "product_id", required=True, help="Product ID.")
def stock_history(product_id: str) -> None:
    """Show the stock transactions of a product."""
    handler = ShowTransactionsHandler(product_repo=product_repository())

    try:
        lines = handler.handle(product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not lines:
        click.echo(f"No transactions recorded for product #{product_id}.")
        return

    click.echo(f"{'ID':<6} {'Date':<22} {'Type':<12} {'Qty':>6}  Notes")
    click.echo("-" * 60)
    for t in lines:
        click.echo(
            f"{t.id:<6} {t.transaction_date:<22} {t.type:<12} {t.signed_quantity:>+6}  {t.notes}"
        )
