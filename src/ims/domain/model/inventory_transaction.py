"""InventoryTransaction — immutable audit record of one stock mutation."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from ims.domain.clock import SystemClock


class TransactionType(Enum):
    ADDITION = "ADDITION"
    WITHDRAWAL = "WITHDRAWAL"


@dataclass(frozen=True)
class InventoryTransaction:
    """A single stock movement of a product.

    ``quantity`` is always the magnitude of the change; the direction
    comes from ``type``. Records are created by ``Product.add_stock`` and
    ``Product.withdraw_stock`` and are never modified afterwards. The
    ``id`` stays ``None`` until the repository assigns one.
    """

    product_id: str | None
    type: TransactionType
    quantity: int
    notes: str = ""
    transaction_date: datetime = field(default_factory=lambda: SystemClock().now())
    id: int | None = None

    @property
    def signed_quantity(self) -> int:
        if self.type is TransactionType.WITHDRAWAL:
            return -self.quantity
        return self.quantity
