from decimal import Decimal

from config.settings_loader import load_settings
from broker.infrastructure.db.mysql_connection import MySQLConnectionProvider
from broker.infrastructure.db.stock_repository import MySQLStockRepository
from broker.application.services.stock_service import StockService
from broker.domain.models.stock import RequestStockDTO

def main():
    cfg = load_settings()
    cp = MySQLConnectionProvider(cfg)
    service = StockService(MySQLStockRepository(cp))

    # Create, update, read back, delete one test stock
    created = service.create_stock(
        RequestStockDTO(symbol="TEST3", company_name="Test Stock", price=Decimal("10.00"))
    )
    print("Inserted stock:", created)

    updated = service.update_stock(
        created.id,
        RequestStockDTO(symbol="TEST4", company_name="Test Stock 2", price=Decimal("12.50")),
    )
    print("Updated stock:", updated)

    print("All stocks:")
    for st in service.get_all_stocks():
        print(st)

    service.delete_stock(created.id)
    print("Deleted, lookup now:", service.get_stock_by_id(created.id))

if __name__ == "__main__":
    main()
