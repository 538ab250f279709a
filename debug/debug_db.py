from config.logging_config import configure_logging
from config.settings_loader import load_settings
from broker.infrastructure.db.mysql_connection import MySQLConnectionProvider

def main():
    configure_logging("DEBUG")
    cfg = load_settings()
    cp = MySQLConnectionProvider(cfg)

    print("Connected to DB:", cp.current_database())

if __name__ == "__main__":
    main()
