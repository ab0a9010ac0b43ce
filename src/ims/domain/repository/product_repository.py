"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.

A product is always loaded and saved together with its full,
ordered transaction history. Identifiers for products and for
transactions are handed out here, never by the domain.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager, nullcontext
from dataclasses import replace

from ims.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by its name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product together with its transactions.

        Must be atomic: either the product and all of its transactions
        are stored, or nothing is.
        """

    def exclusive(self) -> AbstractContextManager[None]:
        """Keep other writers of this store out for the ``with`` body.

        Handlers wrap each load-change-save cycle in it. Stores that
        only one thread can reach need nothing, hence the no-op default.
        """
        return nullcontext()

    # --- Identity assignment --------------------------------------------------

    @staticmethod
    def _with_identities(
        product: Product,
        next_product_id: int,
        next_transaction_id: int,
    ) -> Product:
        """Return a copy of *product* with it and its new transactions numbered.

        Transactions recorded before the product had an id are re-bound
        to it. *product* itself is left alone until the copy is stored;
        see ``_adopt_identities``.
        """
        staged = replace(product, transactions=list(product.transactions))
        if staged.id is None:
            staged.id = str(next_product_id)

        for i, txn in enumerate(staged.transactions):
            if txn.id is None:
                staged.transactions[i] = replace(
                    txn, id=next_transaction_id, product_id=staged.id
                )
                next_transaction_id += 1
        return staged

    @staticmethod
    def _adopt_identities(product: Product, staged: Product) -> None:
        product.id = staged.id
        product.transactions[:] = staged.transactions
