"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.model.inventory_transaction import InventoryTransaction
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money

_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M UTC"


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: str
    name: str
    category: str
    unit_price: str  # formatted, e.g. "$15.00"
    quantity_in_stock: int
    reorder_level: int
    stock_value: str
    low_stock: bool

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        price = Money(product.unit_price)
        return ProductDTO(
            id=product.id,  # type: ignore[arg-type]
            name=product.name,
            category=product.category,
            unit_price=str(price),
            quantity_in_stock=product.quantity_in_stock,
            reorder_level=product.reorder_level,
            stock_value=str(price * max(product.quantity_in_stock, 0)),
            low_stock=product.is_low_stock(),
        )


@dataclass(frozen=True)
class TransactionDTO:
    """Output: one entry of a product's stock history."""

    id: int
    type: str
    quantity: int
    signed_quantity: int
    notes: str
    transaction_date: str

    @staticmethod
    def from_transaction(txn: InventoryTransaction) -> TransactionDTO:
        return TransactionDTO(
            id=txn.id,  # type: ignore[arg-type]
            type=txn.type.value,
            quantity=txn.quantity,
            signed_quantity=txn.signed_quantity,
            notes=txn.notes,
            transaction_date=txn.transaction_date.strftime(_TIMESTAMP_FORMAT),
        )


@dataclass(frozen=True)
class WithdrawalResult:
    """Output: outcome of a withdrawal request.

    ``succeeded`` is False when there was not enough stock; nothing
    was changed in that case.
    """

    succeeded: bool
    requested: int
    quantity_in_stock: int
