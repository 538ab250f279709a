"""Pytest configuration and fixtures."""

from decimal import Decimal
from unittest.mock import create_autospec

import pytest

from broker.application.services.stock_service import StockService
from broker.domain.models.stock import RequestStockDTO
from broker.domain.services_interfaces.i_stock_repo import IStockRepository
from broker.infrastructure.memory.stock_repository import InMemoryStockRepository


@pytest.fixture
def stock_repo():
    """Empty in-memory repository."""
    return InMemoryStockRepository()


@pytest.fixture
def service(stock_repo):
    """StockService over the in-memory repository with the default rules."""
    return StockService(stock_repo)


@pytest.fixture
def repo_spy():
    """Autospecced repository mock, for asserting which calls were made."""
    return create_autospec(IStockRepository, instance=True)


@pytest.fixture
def petr4():
    return RequestStockDTO(symbol="PETR4", company_name="Petrobras", price=Decimal("34.50"))
