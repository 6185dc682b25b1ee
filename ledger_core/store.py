"""
In-memory keyed record store.

Accounts and transactions are each held in one of these, keyed
by id. Durability is left to whoever embeds the core; any backing
store works as long as it keeps lookup by id and insertion order.

A store can be given an existing lock. The ledger and the journal
share one, so a transaction's balance updates and its journal
append become visible to readers together.
"""

import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from pydantic import BaseModel


class InMemoryStore:

    def __init__(self, lock=None):
        self._records: dict[str, BaseModel] = {}
        self.lock = lock if lock is not None else threading.RLock()

    def get(self, record_id: str) -> Optional[BaseModel]:
        """Return a copy of the record, or None if it is absent."""
        with self.lock:
            record = self._records.get(record_id)
            if record is None:
                return None
            return record.model_copy(deep=True)

    def all(self) -> list[BaseModel]:
        """Return copies of every record in insertion order."""
        with self.lock:
            return [r.model_copy(deep=True) for r in self._records.values()]

    def put(self, record_id: str, record: BaseModel) -> None:
        # Stored records are copies and are never mutated in place
        with self.lock:
            self._records[record_id] = record.model_copy(deep=True)

    def exists(self, record_id: str) -> bool:
        with self.lock:
            return record_id in self._records

    def __len__(self) -> int:
        with self.lock:
            return len(self._records)

    def snapshot(self) -> dict[str, BaseModel]:
        with self.lock:
            return dict(self._records)

    def restore(self, snapshot: dict[str, BaseModel]) -> None:
        with self.lock:
            self._records = dict(snapshot)

    @contextmanager
    def atomic(self) -> Iterator[None]:
        """
        Hold the lock for a multi-record write.

        If the block raises, every record is put back the way
        it was before the block started.
        """
        with self.lock:
            saved = self.snapshot()
            try:
                yield
            except Exception:
                self.restore(saved)
                raise
