"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from ims.application.dto import ProductDTO
from ims.domain.repository.product_repository import ProductRepository


class ShowInventoryHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, low_stock_only: bool = False) -> list[ProductDTO]:
        products = self._product_repo.list_all()
        if low_stock_only:
            products = [p for p in products if p.is_low_stock()]
        return [ProductDTO.from_product(p) for p in products]
