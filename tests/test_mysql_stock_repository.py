"""Tests for MySQLStockRepository against a mocked connection provider."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from broker.domain.models.stock import COMPANY_NAME_MAX_LENGTH, SYMBOL_MAX_LENGTH, Stock
from broker.infrastructure.db.stock_repository import CREATE_STOCKS_TABLE, MySQLStockRepository


@pytest.fixture
def cursor():
    return MagicMock()


@pytest.fixture
def repo(cursor):
    conn = MagicMock()
    conn.cursor.return_value = cursor
    provider = MagicMock()
    provider.get_connection.return_value.__enter__.return_value = conn
    return MySQLStockRepository(provider)


ROW = {"id": "id-1", "symbol": "PETR4", "company_name": "Petrobras", "price": Decimal("34.5000")}


class TestMySQLStockRepositoryReads:
    """Tests for find_all and find_by_id."""

    def test_find_all_maps_rows(self, repo, cursor):
        """Rows become Stock objects, ordered by insertion in SQL."""
        cursor.fetchall.return_value = [ROW]

        stocks = repo.find_all()

        assert stocks == [Stock(id="id-1", symbol="PETR4", company_name="Petrobras", price=Decimal("34.5000"))]
        assert "ORDER BY created_at" in cursor.execute.call_args.args[0]

    def test_find_by_id(self, repo, cursor):
        """The id is passed as a query parameter."""
        cursor.fetchone.return_value = ROW

        stock = repo.find_by_id("id-1")

        assert stock.id == "id-1"
        assert cursor.execute.call_args.args[1] == ("id-1",)

    def test_find_by_unknown_id(self, repo, cursor):
        """No row, None."""
        cursor.fetchone.return_value = None
        assert repo.find_by_id("missing") is None


class TestMySQLStockRepositoryWrites:
    """Tests for save and delete_by_id."""

    def test_save_new_stock_assigns_uuid(self, repo, cursor):
        """A stock without id gets a UUID before the insert."""
        stock = Stock(id=None, symbol="VALE3", company_name="Vale", price=Decimal("70"))

        saved = repo.save(stock)

        assert saved is stock
        assert len(saved.id) == 36
        sql, params = cursor.execute.call_args.args
        assert "ON DUPLICATE KEY UPDATE" in sql
        assert params == (saved.id, "VALE3", "Vale", Decimal("70"))

    def test_save_existing_stock_keeps_id(self, repo, cursor):
        """An existing id is written as-is."""
        stock = Stock(id="id-1", symbol="VALE3", company_name="Vale", price=Decimal("70"))

        repo.save(stock)

        assert stock.id == "id-1"
        assert cursor.execute.call_args.args[1][0] == "id-1"

    def test_delete_by_id(self, repo, cursor):
        """DELETE is issued with the id parameter."""
        repo.delete_by_id("id-1")

        sql, params = cursor.execute.call_args.args
        assert sql.startswith("DELETE FROM stocks")
        assert params == ("id-1",)

    def test_create_schema(self, repo, cursor):
        """The stocks table is created if missing."""
        repo.create_schema()
        assert "CREATE TABLE IF NOT EXISTS stocks" in cursor.execute.call_args.args[0]

    def test_schema_matches_validation_limits(self):
        """Column sizes come from the same constants as the rules."""
        assert f"symbol VARCHAR({SYMBOL_MAX_LENGTH})" in CREATE_STOCKS_TABLE
        assert f"company_name VARCHAR({COMPANY_NAME_MAX_LENGTH})" in CREATE_STOCKS_TABLE
        assert "price DECIMAL(18, 4)" in CREATE_STOCKS_TABLE

    def test_driver_errors_propagate(self, repo, cursor):
        """Driver exceptions are not wrapped."""
        cursor.execute.side_effect = RuntimeError("connection lost")

        with pytest.raises(RuntimeError, match="connection lost"):
            repo.find_all()
