# config/logging_config.py

from __future__ import annotations
import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(level: str) -> int:
    """
    Level name -> logging constant. Unknown names fall back to INFO.
    """
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=resolve_level(level), format=LOG_FORMAT)
