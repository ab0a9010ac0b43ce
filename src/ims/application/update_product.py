"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from ims.application.product_locks import ProductLocks
from ims.domain.exceptions import EntityNotFoundError, ValidationError
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money
from ims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository, locks: ProductLocks) -> None:
        self._product_repo = product_repo
        self._locks = locks

    def handle(
        self,
        product_id: str,
        name: str,
        description: str,
        category: str,
        price: str,
        reorder_level: int,
    ) -> Product:
        """Replace a product's descriptive fields.

        Stock is left alone; use the stock handlers to move it. The
        product is saved as a whole, so this runs under the same locks
        as the stock handlers.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        unit_price = Money.of(price)
        if reorder_level < 0:
            raise ValidationError("Reorder level cannot be negative")

        with self._locks.hold(product_id), self._product_repo.exclusive():
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

            other = self._product_repo.get_by_name(name.strip())
            if other is not None and other.id != product.id:
                raise ValidationError(f"Product '{name.strip()}' already exists")

            product.update(
                name=name.strip(),
                description=description,
                category=category,
                unit_price=unit_price.amount,
                reorder_level=reorder_level,
            )
            self._product_repo.save(product)

        logger.info("Updated product #%s '%s'", product.id, product.name)
        return product
