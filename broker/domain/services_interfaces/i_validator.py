# broker/domain/services_interfaces/i_validator.py

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List

from broker.domain.models.violation import Violation


class IValidator(ABC):
    """Checks a candidate object against declared constraints."""

    @abstractmethod
    def validate(self, candidate: Any) -> List[Violation]:
        """
        Returns every violation found. An empty list means the
        candidate is valid. Must not raise for invalid input.
        """
        raise NotImplementedError
