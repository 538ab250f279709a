"""Tests for InMemoryStockRepository."""

import threading
from decimal import Decimal
from unittest.mock import MagicMock

from broker.domain.models.stock import Stock


def _stock(symbol="PETR4", price="34.50"):
    return Stock(id=None, symbol=symbol, company_name=symbol, price=Decimal(price))


class TestInMemoryStockRepository:
    """Tests for the dict-backed repository."""

    def test_save_assigns_id(self, stock_repo):
        """A new stock gets a string id on first save."""
        saved = stock_repo.save(_stock())
        assert isinstance(saved.id, str) and saved.id

    def test_save_keeps_existing_id(self, stock_repo):
        """Saving again overwrites instead of inserting."""
        saved = stock_repo.save(_stock())
        original_id = saved.id

        saved.price = Decimal("40")
        stock_repo.save(saved)

        assert saved.id == original_id
        assert len(stock_repo) == 1
        assert stock_repo.find_by_id(original_id).price == Decimal("40")

    def test_returned_objects_are_copies(self, stock_repo):
        """Mutating a fetched stock does not touch the store until save."""
        saved = stock_repo.save(_stock())

        fetched = stock_repo.find_by_id(saved.id)
        fetched.symbol = "CHANGED"

        assert stock_repo.find_by_id(saved.id).symbol == "PETR4"

    def test_find_all_keeps_insertion_order(self, stock_repo):
        """find_all returns stocks in insertion order."""
        for symbol in ("C", "A", "B"):
            stock_repo.save(_stock(symbol))

        assert [s.symbol for s in stock_repo.find_all()] == ["C", "A", "B"]

    def test_find_by_unknown_id(self, stock_repo):
        """Unknown ids give None."""
        assert stock_repo.find_by_id("nope") is None

    def test_delete_unknown_id_is_noop(self, stock_repo):
        """Deleting an unknown id leaves the store untouched."""
        stock_repo.save(_stock())
        stock_repo.delete_by_id("nope")
        assert len(stock_repo) == 1

    def test_concurrent_saves(self, stock_repo):
        """Parallel inserts all land with distinct ids."""
        def worker():
            for _ in range(50):
                stock_repo.save(_stock())

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        stocks = stock_repo.find_all()
        assert len(stocks) == 200
        assert len({s.id for s in stocks}) == 200

    def test_len_takes_the_lock(self, stock_repo):
        """len() reads the rows under the same lock as the other methods."""
        stock_repo.save(_stock())
        stock_repo._lock = MagicMock()

        assert len(stock_repo) == 1
        stock_repo._lock.__enter__.assert_called_once()
