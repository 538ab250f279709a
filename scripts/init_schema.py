import sys
import os

# Add project root to the path so the packages resolve when run directly
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.abspath(os.path.join(current_dir, '..'))
sys.path.append(project_root)

import mysql.connector

from config.settings_loader import load_settings
from broker.infrastructure.db.mysql_connection import MySQLConnectionProvider
from broker.infrastructure.db.stock_repository import MySQLStockRepository


def main():
    config = load_settings()
    db_provider = MySQLConnectionProvider(config)

    try:
        db_name = db_provider.current_database()
    except mysql.connector.Error as e:
        print(f"ERROR: could not connect to {config.describe()}: {e}")
        sys.exit(1)

    MySQLStockRepository(db_provider).create_schema()
    print(f"'stocks' table ready in {db_name}.")


if __name__ == "__main__":
    main()
