"""Application service: Add Stock use case."""

from __future__ import annotations

import logging

from ims.application.product_locks import ProductLocks
from ims.domain.exceptions import EntityNotFoundError
from ims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddStockHandler:

    def __init__(self, product_repo: ProductRepository, locks: ProductLocks) -> None:
        self._product_repo = product_repo
        self._locks = locks

    def handle(self, product_id: str, quantity: int, notes: str = "") -> int:
        """Receive stock for a product and return the new stock level."""
        with self._locks.hold(product_id), self._product_repo.exclusive():
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

            product.add_stock(quantity, notes)
            self._product_repo.save(product)

        logger.info(
            "Added %d to product #%s, now %d in stock",
            quantity, product_id, product.quantity_in_stock,
        )
        return product.quantity_in_stock
