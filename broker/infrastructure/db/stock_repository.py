# broker/infrastructure/db/stock_repository.py

from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from broker.domain.models.stock import (
    COMPANY_NAME_MAX_LENGTH,
    PRICE_FRACTION_DIGITS,
    PRICE_INTEGER_DIGITS,
    SYMBOL_MAX_LENGTH,
    Stock,
)
from broker.domain.services_interfaces.i_stock_repo import IStockRepository
from .mysql_connection import MySQLConnectionProvider

logger = logging.getLogger(__name__)


CREATE_STOCKS_TABLE = f"""
    CREATE TABLE IF NOT EXISTS stocks (
        id CHAR(36) NOT NULL PRIMARY KEY,
        symbol VARCHAR({SYMBOL_MAX_LENGTH}) NOT NULL,
        company_name VARCHAR({COMPANY_NAME_MAX_LENGTH}) NOT NULL,
        price DECIMAL({PRICE_INTEGER_DIGITS + PRICE_FRACTION_DIGITS}, {PRICE_FRACTION_DIGITS}) NOT NULL,
        created_at TIMESTAMP(6) NOT NULL DEFAULT CURRENT_TIMESTAMP(6)
    )
"""


class MySQLStockRepository(IStockRepository):
    """
    MySQL implementation of IStockRepository.
    Reads and writes the 'stocks' table.
    """

    def __init__(self, connection_provider: MySQLConnectionProvider) -> None:
        self._cp = connection_provider

    # ---------- Schema ---------- #

    def create_schema(self) -> None:
        with self._cp.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(CREATE_STOCKS_TABLE)

    # ---------- Row → Domain Mapper ---------- #

    def _row_to_stock(self, row: dict) -> Stock:
        return Stock(
            id=row["id"],
            symbol=row["symbol"],
            company_name=row["company_name"],
            price=row["price"],
        )

    # ---------- READ operations ---------- #

    def find_all(self) -> List[Stock]:
        sql = """
            SELECT id, symbol, company_name, price
            FROM stocks
            ORDER BY created_at, id
        """
        with self._cp.get_connection() as conn:
            cursor = conn.cursor(dictionary=True)
            cursor.execute(sql)
            rows = cursor.fetchall()

        return [self._row_to_stock(r) for r in rows]

    def find_by_id(self, stock_id: str) -> Optional[Stock]:
        sql = """
            SELECT id, symbol, company_name, price
            FROM stocks
            WHERE id = %s
        """
        with self._cp.get_connection() as conn:
            cursor = conn.cursor(dictionary=True)
            cursor.execute(sql, (stock_id,))
            row = cursor.fetchone()

        if row is None:
            return None
        return self._row_to_stock(row)

    # ---------- WRITE operations ---------- #

    def save(self, stock: Stock) -> Stock:
        """
        Insert-or-update keyed on id. A stock without id gets a fresh
        UUID before the insert.
        """
        if stock.id is None:
            stock.id = str(uuid.uuid4())

        sql = """
            INSERT INTO stocks (id, symbol, company_name, price)
            VALUES (%s, %s, %s, %s)
            ON DUPLICATE KEY UPDATE
                symbol = VALUES(symbol),
                company_name = VALUES(company_name),
                price = VALUES(price)
        """
        with self._cp.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                sql,
                (
                    stock.id,
                    stock.symbol,
                    stock.company_name,
                    stock.price,
                ),
            )

        logger.debug("Saved stock row %s", stock.id)
        return stock

    def delete_by_id(self, stock_id: str) -> None:
        sql = "DELETE FROM stocks WHERE id = %s"
        with self._cp.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(sql, (stock_id,))
