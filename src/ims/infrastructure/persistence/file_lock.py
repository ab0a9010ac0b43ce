"""Exclusive locks on sidecar lock files.

A lock is identified by the resolved path of its lock file, so every
repository instance in the process that points at the same data file
shares one thread lock, and ``fcntl.flock`` keeps other ``ims``
processes out for as long as it is held. Locks are not reentrant.
"""

from __future__ import annotations

import fcntl
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

_guard = threading.Lock()
_thread_locks: dict[Path, threading.Lock] = {}


@contextmanager
def file_lock(lock_path: Path) -> Iterator[None]:
    lock_path.parent.mkdir(parents=True, exist_ok=True)
    key = lock_path.resolve()
    with _guard:
        thread_lock = _thread_locks.setdefault(key, threading.Lock())

    with thread_lock, open(lock_path, "a", encoding="utf-8") as handle:
        fcntl.flock(handle, fcntl.LOCK_EX)
        try:
            yield
        finally:
            fcntl.flock(handle, fcntl.LOCK_UN)
