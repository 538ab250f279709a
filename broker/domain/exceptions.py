# broker/domain/exceptions.py

from __future__ import annotations

from typing import Iterable, Tuple

from broker.domain.models.violation import Violation


class ValidationFailed(ValueError):
    """
    Raised when a request object breaks one or more declared constraints.

    Carries every violation, not only the first one.
    """

    PREFIX = "Validation failed. Details: "

    def __init__(self, violations: Iterable[Violation]) -> None:
        self.violations: Tuple[Violation, ...] = tuple(violations)
        self.message = self.PREFIX + ", ".join(str(v) for v in self.violations)
        super().__init__(self.message)

    @property
    def field_paths(self) -> Tuple[str, ...]:
        return tuple(v.field_path for v in self.violations)
