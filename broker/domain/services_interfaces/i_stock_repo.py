# broker/domain/services_interfaces/i_stock_repo.py

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from broker.domain.models.stock import Stock


class IStockRepository(ABC):
    """
    Abstract access to stored stocks.

    The service layer programs against this interface; MySQL and the
    in-memory store implement it.
    """

    # ---------- READ operations ---------- #

    @abstractmethod
    def find_all(self) -> List[Stock]:
        """
        Returns every stock, in storage order.
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, stock_id: str) -> Optional[Stock]:
        """
        Returns a single stock by id.
        None if it does not exist.
        """
        raise NotImplementedError

    # ---------- WRITE operations ---------- #

    @abstractmethod
    def save(self, stock: Stock) -> Stock:
        """
        Inserts the stock if it has no id yet, otherwise overwrites the
        stored record with the same id.
        Returns:
          the stock, carrying its assigned id.
        """
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, stock_id: str) -> None:
        """
        Deletes the stock. Unknown ids are a no-op.
        """
        raise NotImplementedError
