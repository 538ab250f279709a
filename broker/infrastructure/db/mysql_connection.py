# broker/infrastructure/db/mysql_connection.py

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Generator, Optional

import mysql.connector
from mysql.connector import pooling

logger = logging.getLogger(__name__)


@dataclass
class MySQLConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_name: str = "broker_pool"
    pool_size: int = 5

    def describe(self) -> str:
        """host:port/database, without credentials, for log lines."""
        return f"{self.host}:{self.port}/{self.database}"


class MySQLConnectionProvider:
    """
    Pooled MySQL connections for the stock repositories.

    One provider per process. Each `get_connection()` block is one
    unit of work: committed when the block exits normally, rolled back
    when it raises. The pool is created lazily on first use.
    """

    def __init__(self, config: MySQLConfig) -> None:
        self._config = config
        self._pool: Optional[pooling.MySQLConnectionPool] = None

    @property
    def config(self) -> MySQLConfig:
        return self._config

    def _ensure_pool(self) -> pooling.MySQLConnectionPool:
        if self._pool is None:
            logger.info(
                "Opening MySQL pool %s (%d connections) on %s",
                self._config.pool_name,
                self._config.pool_size,
                self._config.describe(),
            )
            self._pool = pooling.MySQLConnectionPool(
                pool_name=self._config.pool_name,
                pool_size=self._config.pool_size,
                pool_reset_session=True,
                host=self._config.host,
                port=self._config.port,
                user=self._config.user,
                password=self._config.password,
                database=self._config.database,
            )
        return self._pool

    @contextmanager
    def get_connection(self) -> Generator[mysql.connector.MySQLConnection, None, None]:
        """
        Use as `with provider.get_connection() as conn:`.
        """
        conn = self._ensure_pool().get_connection()
        try:
            yield conn
            conn.commit()
        except Exception:
            logger.warning("Rolling back MySQL transaction", exc_info=True)
            conn.rollback()
            raise
        finally:
            conn.close()

    def current_database(self) -> str:
        """
        Round-trips to the server and returns the selected schema name.
        Raises mysql.connector.Error when the server is unreachable.
        """
        with self.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT DATABASE()")
            return cursor.fetchone()[0]
