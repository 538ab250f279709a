# broker/application/validation/stock_rules.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from broker.domain.models.stock import (
    COMPANY_NAME_MAX_LENGTH,
    PRICE_FRACTION_DIGITS,
    PRICE_INTEGER_DIGITS,
    SYMBOL_MAX_LENGTH,
)
from broker.domain.models.violation import Violation
from broker.domain.services_interfaces.i_validator import IValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rule:
    """
    A single constraint: predicate(value) must be True, otherwise
    `message` is reported for the field.
    """
    predicate: Callable[[Any], bool]
    message: str


# ---------- Predicates ---------- #
# Only the explicit null checks reject None; the rest let it through
# so a missing field is reported once.

def _not_null(value: Any) -> bool:
    return value is not None


def _not_blank(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _to_decimal(value: Any) -> Optional[Decimal]:
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None


def _non_negative(value: Any) -> bool:
    if value is None:
        return True
    number = _to_decimal(value)
    if number is None:
        return False
    try:
        return number >= 0
    except InvalidOperation:
        return False


def _max_len(limit: int) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        return not isinstance(value, str) or len(value) <= limit
    return check


def _finite(value: Any) -> bool:
    number = _to_decimal(value) if value is not None else None
    return number is None or number.is_finite()


def _digits(integer: int, fraction: int) -> Callable[[Any], bool]:
    """
    At most `integer` digits before the point and `fraction` after it,
    ignoring trailing zeros. Non-numeric or non-finite values pass;
    other rules report them.
    """
    def check(value: Any) -> bool:
        number = _to_decimal(value) if value is not None else None
        if number is None or not number.is_finite():
            return True
        integer_digits = len(str(int(abs(number)))) if abs(number) >= 1 else 0
        exponent = number.normalize().as_tuple().exponent
        fraction_digits = max(0, -exponent)
        return integer_digits <= integer and fraction_digits <= fraction
    return check


STOCK_RULES: Dict[str, Tuple[Rule, ...]] = {
    "symbol": (
        Rule(_not_blank, "must not be blank"),
        Rule(_max_len(SYMBOL_MAX_LENGTH), f"size must be between 0 and {SYMBOL_MAX_LENGTH}"),
    ),
    "company_name": (
        Rule(_not_blank, "must not be blank"),
        Rule(
            _max_len(COMPANY_NAME_MAX_LENGTH),
            f"size must be between 0 and {COMPANY_NAME_MAX_LENGTH}",
        ),
    ),
    "price": (
        Rule(_not_null, "must not be null"),
        Rule(_non_negative, "must be greater than or equal to 0"),
        Rule(_finite, "must be a finite number"),
        Rule(
            _digits(PRICE_INTEGER_DIGITS, PRICE_FRACTION_DIGITS),
            f"numeric value out of bounds "
            f"(<{PRICE_INTEGER_DIGITS} digits>.<{PRICE_FRACTION_DIGITS} digits> expected)",
        ),
    ),
}


class RuleTableValidator(IValidator):
    """
    IValidator driven by a field -> rules table.

    Every rule of every field is evaluated; violations come back in
    table order.
    """

    def __init__(self, rules: Mapping[str, Tuple[Rule, ...]] = STOCK_RULES) -> None:
        self._rules = rules

    def validate(self, candidate: Any) -> List[Violation]:
        violations: List[Violation] = []
        for field_path, rules in self._rules.items():
            value = getattr(candidate, field_path, None)
            for rule in rules:
                if not rule.predicate(value):
                    violations.append(Violation(field_path, rule.message))

        if violations:
            logger.debug("%d violation(s) on %s", len(violations), type(candidate).__name__)
        return violations
