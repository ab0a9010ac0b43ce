"""Per-product locks for product mutations.

Loading a product, changing it and saving it back must not interleave
with another mutation of the same product, or one of the two writes
would be lost along with its transaction record. Different products
never block each other.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field


@dataclass
class _Entry:
    lock: threading.Lock = field(default_factory=threading.Lock)
    users: int = 0


class ProductLocks:

    def __init__(self) -> None:
        self._guard = threading.Lock()
        # Only ids with a holder or a waiter have an entry.
        self._locks: dict[str, _Entry] = {}

    @contextmanager
    def hold(self, product_id: str) -> Iterator[None]:
        """Hold the exclusive lock for *product_id* for the ``with`` body."""
        with self._guard:
            entry = self._locks.setdefault(product_id, _Entry())
            entry.users += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._guard:
                entry.users -= 1
                if entry.users == 0:
                    del self._locks[product_id]

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)
