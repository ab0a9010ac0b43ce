"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from ims.domain.clock import Clock, SystemClock
from ims.domain.exceptions import ValidationError
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money
from ims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository, clock: Clock | None = None) -> None:
        self._product_repo = product_repo
        self._clock = clock or SystemClock()

    def handle(
        self,
        name: str,
        description: str,
        category: str,
        price: str,
        quantity: int,
        reorder_level: int,
    ) -> Product:
        """Add a new product with its opening stock level.

        ``Product.create`` trusts its arguments, so the checks on the
        opening values are made here.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        unit_price = Money.of(price)
        if quantity < 0:
            raise ValidationError("Initial quantity cannot be negative")
        if reorder_level < 0:
            raise ValidationError("Reorder level cannot be negative")

        with self._product_repo.exclusive():
            existing = self._product_repo.get_by_name(name.strip())
            if existing is not None:
                raise ValidationError(f"Product '{name.strip()}' already exists")

            product = Product.create(
                name=name.strip(),
                description=description,
                category=category,
                unit_price=unit_price.amount,
                quantity_in_stock=quantity,
                reorder_level=reorder_level,
                clock=self._clock,
            )
            self._product_repo.save(product)

        logger.info(
            "Added product #%s '%s' with %d in stock", product.id, product.name, quantity
        )
        return product
