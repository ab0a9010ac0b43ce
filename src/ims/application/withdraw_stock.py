"""Application service: Withdraw Stock use case."""

from __future__ import annotations

import logging

from ims.application.dto import WithdrawalResult
from ims.application.product_locks import ProductLocks
from ims.domain.exceptions import EntityNotFoundError
from ims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class WithdrawStockHandler:

    def __init__(self, product_repo: ProductRepository, locks: ProductLocks) -> None:
        self._product_repo = product_repo
        self._locks = locks

    def handle(self, product_id: str, quantity: int, notes: str = "") -> WithdrawalResult:
        """Take stock out of a product.

        A refused withdrawal is reported through the result and leaves
        the stored product untouched.
        """
        with self._locks.hold(product_id), self._product_repo.exclusive():
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

            succeeded = product.withdraw_stock(quantity, notes)
            if succeeded:
                self._product_repo.save(product)

        if not succeeded:
            logger.warning(
                "Refused withdrawal of %d from product #%s: only %d in stock",
                quantity, product_id, product.quantity_in_stock,
            )
        else:
            logger.info(
                "Withdrew %d from product #%s, now %d in stock",
                quantity, product_id, product.quantity_in_stock,
            )
            if product.is_low_stock():
                logger.warning(
                    "Product #%s '%s' is at or below its reorder level (%d <= %d)",
                    product_id, product.name,
                    product.quantity_in_stock, product.reorder_level,
                )

        return WithdrawalResult(
            succeeded=succeeded,
            requested=quantity,
            quantity_in_stock=product.quantity_in_stock,
        )
