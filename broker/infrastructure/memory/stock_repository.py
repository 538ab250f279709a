# broker/infrastructure/memory/stock_repository.py

from __future__ import annotations

import threading
import uuid
from dataclasses import replace
from typing import Dict, List, Optional

from broker.domain.models.stock import Stock
from broker.domain.services_interfaces.i_stock_repo import IStockRepository


class InMemoryStockRepository(IStockRepository):
    """
    Dict-backed IStockRepository, for local runs and tests.

    Stores copies, so a Stock handed out by find_* only changes the
    store once it goes back through save(). Insertion order is kept.
    """

    def __init__(self) -> None:
        self._rows: Dict[str, Stock] = {}
        self._lock = threading.Lock()

    # ---------- READ operations ---------- #

    def find_all(self) -> List[Stock]:
        with self._lock:
            return [replace(s) for s in self._rows.values()]

    def find_by_id(self, stock_id: str) -> Optional[Stock]:
        with self._lock:
            stock = self._rows.get(stock_id)
            return replace(stock) if stock is not None else None

    # ---------- WRITE operations ---------- #

    def save(self, stock: Stock) -> Stock:
        with self._lock:
            if stock.id is None:
                stock.id = str(uuid.uuid4())
            self._rows[stock.id] = replace(stock)
        return stock

    def delete_by_id(self, stock_id: str) -> None:
        with self._lock:
            self._rows.pop(stock_id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)
