# broker/application/services/stock_service.py

from __future__ import annotations

import logging
from typing import List, Optional, Union

from broker.application.validation.stock_rules import RuleTableValidator
from broker.domain.exceptions import ValidationFailed
from broker.domain.models.stock import RequestStockDTO, Stock
from broker.domain.services_interfaces.i_stock_repo import IStockRepository
from broker.domain.services_interfaces.i_validator import IValidator

logger = logging.getLogger(__name__)


class StockService:
    """
    CRUD operations for stocks.

    - Validates request DTOs before anything is created
    - Otherwise delegates straight to the repository
    - update_stock does NOT validate (kept asymmetric with create_stock)
    """

    def __init__(
        self,
        stock_repo: IStockRepository,
        validator: Optional[IValidator] = None,
    ) -> None:
        self._stock_repo = stock_repo
        self._validator = validator if validator is not None else RuleTableValidator()

    # ---------- READ operations ---------- #

    def get_all_stocks(self) -> List[Stock]:
        """Returns every stored stock, in storage order."""
        return self._stock_repo.find_all()

    def get_stock_by_id(self, stock_id: str) -> Optional[Stock]:
        """Returns the stock with this id, or None."""
        stock = self._stock_repo.find_by_id(stock_id)
        if stock is None:
            logger.debug("Stock %s not found", stock_id)
        return stock

    # ---------- WRITE operations ---------- #

    def create_stock(self, data: RequestStockDTO) -> Stock:
        """
        Builds a Stock from the DTO, validates the DTO and saves it.

        Returns:
            The saved Stock, carrying its assigned id.

        Raises:
            ValidationFailed: if the DTO breaks any constraint. Nothing
            is saved in that case.
        """
        new_stock = Stock.from_request(data)
        self.validate_request_stock(data)

        saved = self._stock_repo.save(new_stock)
        logger.info("Created stock %s (%s)", saved.id, saved.symbol)
        return saved

    def update_stock(
        self,
        stock_id: str,
        updated_stock: Union[RequestStockDTO, Stock],
    ) -> Optional[Stock]:
        """
        Overwrites symbol, company_name and price of an existing stock.

        `updated_stock` is a RequestStockDTO or another Stock. The stored id is kept.

        Returns:
            The saved Stock, or None if no stock has this id (nothing
            is written then).
        """
        stock = self._stock_repo.find_by_id(stock_id)
        if stock is None:
            logger.warning("Update skipped, stock %s not found", stock_id)
            return None

        stock.symbol = updated_stock.symbol
        stock.company_name = updated_stock.company_name
        stock.price = updated_stock.price

        saved = self._stock_repo.save(stock)
        logger.info("Updated stock %s", stock_id)
        return saved

    def delete_stock(self, stock_id: str) -> None:
        """
        Deletes the stock. No existence check; the repository decides
        what deleting an unknown id means.
        """
        self._stock_repo.delete_by_id(stock_id)
        logger.info("Deleted stock %s", stock_id)

    # ---------- Validation ---------- #

    def validate_request_stock(self, data: RequestStockDTO) -> None:
        """
        Runs every declared constraint against the DTO.

        Raises:
            ValidationFailed: with all violations, e.g.
              "Validation failed. Details: [symbol: must not be blank], [price: ...]"
        """
        violations = self._validator.validate(data)
        if violations:
            error = ValidationFailed(violations)
            logger.warning(error.message)
            raise error

    def validate_and_create_stock(self, data: RequestStockDTO) -> None:
        """
        Validates the DTO first, then builds and saves a new Stock.
        Same effect as create_stock, but returns nothing.
        """
        self.validate_request_stock(data)

        new_stock = Stock.from_request(data)
        saved = self._stock_repo.save(new_stock)
        logger.info("Created stock %s (%s)", saved.id, saved.symbol)
