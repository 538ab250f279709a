import logging
from decimal import Decimal

from config.logging_config import configure_logging
from config.settings_loader import AppSettings, load_app_settings
from broker.infrastructure.db.mysql_connection import MySQLConnectionProvider
from broker.infrastructure.db.stock_repository import MySQLStockRepository
from broker.infrastructure.memory.stock_repository import InMemoryStockRepository
from broker.domain.models.stock import RequestStockDTO
from broker.domain.services_interfaces.i_stock_repo import IStockRepository
from broker.application.validation.stock_rules import RuleTableValidator
from broker.application.services.stock_service import StockService

logger = logging.getLogger(__name__)


def build_stock_repository(settings: AppSettings) -> IStockRepository:
    if settings.repository_backend == "mysql":
        conn_provider = MySQLConnectionProvider(settings.db)
        return MySQLStockRepository(conn_provider)
    return InMemoryStockRepository()


def build_stock_service(settings: AppSettings) -> StockService:
    # 1) Repository
    stock_repo = build_stock_repository(settings)

    # 2) Validator
    validator = RuleTableValidator()

    # 3) Service
    return StockService(stock_repo, validator)


def main():
    settings = load_app_settings()
    configure_logging(settings.log_level)
    logger.info("Using %s stock repository", settings.repository_backend)

    service = build_stock_service(settings)

    service.create_stock(
        RequestStockDTO(symbol="PETR4", company_name="Petrobras", price=Decimal("34.50"))
    )

    for stock in service.get_all_stocks():
        print(stock)


if __name__ == "__main__":
    main()
