from superhuman_fm.store.db import init_db
from superhuman_fm.config import get_settings
import logging

logging.basicConfig(level=logging.INFO)

if __name__ == "__main__":
    logging.info(f"Initializing database at {get_settings().DB_PATH}...")
    init_db()
    logging.info("Database initialized.")
