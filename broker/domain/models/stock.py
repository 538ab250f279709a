# broker/domain/models/stock.py

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

# Column limits of the stocks table; the validation rules enforce the same bounds.
SYMBOL_MAX_LENGTH = 16
COMPANY_NAME_MAX_LENGTH = 255
PRICE_INTEGER_DIGITS = 14
PRICE_FRACTION_DIGITS = 4


@dataclass(frozen=True)
class RequestStockDTO:
    """
    Input carried into the service when a new stock is created.

    Any field may be None; the validator reports it.
    """
    symbol: Optional[str]
    company_name: Optional[str]
    price: Optional[Decimal]


@dataclass
class Stock:
    """
    Domain counterpart of the 'stocks' table.

    Not frozen: update_stock overwrites symbol / company_name / price
    on the stored instance. The id is assigned by the repository on
    first save and never changes afterwards.
    """
    id: Optional[str]
    symbol: str
    company_name: str
    price: Decimal

    @classmethod
    def from_request(cls, data: RequestStockDTO) -> "Stock":
        """
        Builds an unsaved Stock (id=None) from a request DTO.
        """
        return cls(
            id=None,
            symbol=data.symbol,
            company_name=data.company_name,
            price=data.price,
        )
