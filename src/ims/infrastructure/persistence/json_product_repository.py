"""JSON-file-backed implementation of ProductRepository.

All products live in one JSON document, each with its transaction
history nested under it. Every save rewrites the document through a
temporary file and ``os.replace``, so a product and its transactions
reach disk together or not at all.

Two sidecar lock files sit next to the document: ``<name>.lock`` is
held by ``exclusive()`` around a handler's whole load-change-save
cycle, ``<name>.write.lock`` around each individual save. Both are
shared by every repository instance and every process using the file.
"""

from __future__ import annotations

import json
import logging
import os
from contextlib import AbstractContextManager
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from ims.domain.clock import Clock, SystemClock
from ims.domain.model.inventory_transaction import InventoryTransaction, TransactionType
from ims.domain.model.product import Product
from ims.domain.repository.product_repository import ProductRepository
from ims.infrastructure.persistence.file_lock import file_lock

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path, clock: Clock | None = None) -> None:
        self._file_path = file_path
        self._clock = clock or SystemClock()
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._load_raw():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Product | None:
        for raw in self._load_raw():
            if raw["name"].lower() == name.lower():
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, product: Product) -> None:
        with file_lock(self._sidecar(".write.lock")):
            records = self._load_raw()
            staged = self._with_identities(
                product,
                next_product_id=max((int(r["id"]) for r in records), default=0) + 1,
                next_transaction_id=max(
                    (t["id"] for r in records for t in r["transactions"]), default=0
                ) + 1,
            )

            for i, raw in enumerate(records):
                if raw["id"] == staged.id:
                    records[i] = self._to_raw(staged)
                    break
            else:
                records.append(self._to_raw(staged))
            self._persist_raw(records)

        self._adopt_identities(product, staged)

    def exclusive(self) -> AbstractContextManager[None]:
        return file_lock(self._sidecar(".lock"))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "category": product.category,
            "unit_price": str(product.unit_price),
            "quantity_in_stock": product.quantity_in_stock,
            "reorder_level": product.reorder_level,
            "created_at": product.created_at.isoformat(),
            "updated_at": product.updated_at.isoformat() if product.updated_at else None,
            "transactions": [
                {
                    "id": txn.id,
                    "product_id": txn.product_id,
                    "type": txn.type.value,
                    "quantity": txn.quantity,
                    "notes": txn.notes,
                    "transaction_date": txn.transaction_date.isoformat(),
                }
                for txn in product.transactions
            ],
        }

    def _to_domain(self, raw: dict) -> Product:
        updated_at = raw.get("updated_at")
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
            category=raw.get("category", ""),
            unit_price=Decimal(raw["unit_price"]),
            quantity_in_stock=raw["quantity_in_stock"],
            reorder_level=raw["reorder_level"],
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(updated_at) if updated_at else None,
            transactions=[
                InventoryTransaction(
                    id=txn["id"],
                    product_id=txn["product_id"],
                    type=TransactionType(txn["type"]),
                    quantity=txn["quantity"],
                    notes=txn.get("notes", ""),
                    transaction_date=datetime.fromisoformat(txn["transaction_date"]),
                )
                for txn in raw.get("transactions", [])
            ],
            clock=self._clock,
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        tmp_path = self._file_path.with_suffix(self._file_path.suffix + ".tmp")
        try:
            tmp_path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
            os.replace(tmp_path, self._file_path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise
        logger.debug("Wrote %d products to %s", len(records), self._file_path)

    def _sidecar(self, suffix: str) -> Path:
        return self._file_path.with_name(self._file_path.name + suffix)

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        with file_lock(self._sidecar(".write.lock")):
            if not self._file_path.exists():
                self._file_path.write_text("[]", encoding="utf-8")
