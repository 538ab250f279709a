# broker/domain/models/violation.py

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Violation:
    """
    One failed constraint: which field, and why.
    """
    field_path: str
    message: str

    def __str__(self) -> str:
        return f"[{self.field_path}: {self.message}]"
