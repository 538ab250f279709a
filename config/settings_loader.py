# config/settings_loader.py

from __future__ import annotations
import os
from dataclasses import dataclass
from dotenv import load_dotenv
from broker.infrastructure.db.mysql_connection import MySQLConfig

REPOSITORY_BACKENDS = ("memory", "mysql")


@dataclass(frozen=True)
class AppSettings:
    db: MySQLConfig
    repository_backend: str = "memory"
    log_level: str = "INFO"


def load_settings() -> MySQLConfig:
    """
    Reads the .env file and builds a MySQLConfig.
    """
    load_dotenv()  # .env is searched upwards from the working directory

    host = os.getenv("DB_HOST", "localhost")
    port = int(os.getenv("DB_PORT", "3306"))
    user = os.getenv("DB_USER", "root")
    password = os.getenv("DB_PASSWORD", "")
    database = os.getenv("DB_NAME", "mandacaru_broker")

    pool_name = os.getenv("POOL_NAME", "broker_pool")
    pool_size = int(os.getenv("POOL_SIZE", "5"))

    return MySQLConfig(
        host=host,
        port=port,
        user=user,
        password=password,
        database=database,
        pool_name=pool_name,
        pool_size=pool_size,
    )


def load_app_settings() -> AppSettings:
    """
    MySQLConfig plus the repository backend and log level.
    """
    db = load_settings()

    backend = os.getenv("STOCK_REPOSITORY", "memory").strip().lower()
    if backend not in REPOSITORY_BACKENDS:
        raise ValueError(
            f"STOCK_REPOSITORY must be one of {REPOSITORY_BACKENDS}, got {backend!r}"
        )

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()

    return AppSettings(db=db, repository_backend=backend, log_level=log_level)
