"""Product aggregate.

A product owns its stock counter and the history of every change made
to it. The only way to move stock is through ``add_stock`` and
``withdraw_stock``; each successful call appends exactly one
InventoryTransaction, so the counter and the history never disagree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from ims.domain.clock import Clock, SystemClock
from ims.domain.exceptions import ValidationError
from ims.domain.model.inventory_transaction import InventoryTransaction, TransactionType


@dataclass
class Product:
    """Aggregate root for a stocked product.

    Use the ``Product.create()`` factory for new products. The
    ``__init__`` takes every field so the repository can reconstitute
    a persisted product, history included, without side effects.
    """

    id: str | None
    name: str
    description: str
    category: str
    unit_price: Decimal
    quantity_in_stock: int
    reorder_level: int
    created_at: datetime
    updated_at: datetime | None = None
    transactions: list[InventoryTransaction] = field(default_factory=list)
    clock: Clock = field(default_factory=SystemClock, repr=False, compare=False)

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        name: str,
        description: str,
        category: str,
        unit_price: Decimal,
        quantity_in_stock: int,
        reorder_level: int,
        clock: Clock | None = None,
    ) -> Product:
        """Create a new, unsaved product.

        Initial values are taken as given; checks on them belong to the
        caller (see ``AddProductHandler``).
        """
        clock = clock or SystemClock()
        return Product(
            id=None,
            name=name,
            description=description,
            category=category,
            unit_price=unit_price,
            quantity_in_stock=quantity_in_stock,
            reorder_level=reorder_level,
            created_at=clock.now(),
            clock=clock,
        )

    # --- Stock mutations ------------------------------------------------------

    def add_stock(self, quantity: int, notes: str = "") -> None:
        """Receive *quantity* units into stock."""
        if quantity <= 0:
            raise ValidationError("Quantity to add must be positive")
        self.quantity_in_stock += quantity
        self._record(TransactionType.ADDITION, quantity, notes)

    def withdraw_stock(self, quantity: int, notes: str = "") -> bool:
        """Take *quantity* units out of stock.

        Returns False, leaving the product untouched, when fewer than
        *quantity* units are on hand.
        """
        if quantity <= 0:
            raise ValidationError("Quantity to withdraw must be positive")
        if quantity > self.quantity_in_stock:
            return False
        self.quantity_in_stock -= quantity
        self._record(TransactionType.WITHDRAWAL, quantity, notes)
        return True

    # --- Queries --------------------------------------------------------------

    def is_low_stock(self) -> bool:
        return self.quantity_in_stock <= self.reorder_level

    # --- Metadata -------------------------------------------------------------

    def update(
        self,
        name: str,
        description: str,
        category: str,
        unit_price: Decimal,
        reorder_level: int,
    ) -> None:
        """Overwrite the descriptive fields.

        Stock is never changed here, so no transaction is recorded.
        """
        self.name = name
        self.description = description
        self.category = category
        self.unit_price = unit_price
        self.reorder_level = reorder_level

        now = self.clock.now()
        if self.updated_at is not None and now < self.updated_at:
            now = self.updated_at
        self.updated_at = now

    # --- Internal helpers -----------------------------------------------------

    def _record(self, type_: TransactionType, quantity: int, notes: str) -> None:
        self.transactions.append(
            InventoryTransaction(
                product_id=self.id,
                type=type_,
                quantity=quantity,
                notes=notes,
                transaction_date=self.clock.now(),
            )
        )
