"""Application service: Show Transactions use case (query)."""

from __future__ import annotations

from ims.application.dto import TransactionDTO
from ims.domain.exceptions import EntityNotFoundError
from ims.domain.repository.product_repository import ProductRepository


class ShowTransactionsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> list[TransactionDTO]:
        """Return a product's stock history, oldest first."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return [TransactionDTO.from_transaction(t) for t in product.transactions]
