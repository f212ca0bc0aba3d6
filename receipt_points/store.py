"""
In-memory receipt store.

Receipts live in an append-only list for the lifetime of the process. The
identifier of a receipt is its insertion index. Every access holds the lock:
FastAPI runs sync endpoints on a thread pool.
"""
from __future__ import annotations

import logging
import threading

from receipt_points.errors import ReceiptNotFound
from receipt_points.schemas import Receipt

logger = logging.getLogger(__name__)


class ReceiptStore:
    def __init__(self) -> None:
        self._receipts: list[Receipt] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._receipts)

    def append(self, receipt: Receipt) -> str:
        """Store ``receipt`` under the next sequential id and return the id."""
        with self._lock:
            receipt_id = str(len(self._receipts))
            self._receipts.append(receipt.model_copy(update={"id": receipt_id}))
        logger.info("Stored receipt %s", receipt_id)
        return receipt_id

    def list(self) -> list[Receipt]:
        with self._lock:
            return list(self._receipts)

    def find(self, receipt_id: str) -> Receipt:
        with self._lock:
            for receipt in self._receipts:
                if receipt.id == receipt_id:
                    return receipt
        raise ReceiptNotFound(receipt_id)


_store = ReceiptStore()


def get_store() -> ReceiptStore:
    """Store dependency."""
    return _store
