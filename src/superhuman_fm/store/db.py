"""SQLite database connection and schema management.

Provides get_db_connection() context manager and init_db() for schema creation.
Stores one row per user in the user_preferences table.
"""

import sqlite3
from ..config import get_settings
from contextlib import contextmanager

settings = get_settings()

@contextmanager
def get_db_connection():
    conn = sqlite3.connect(settings.DB_PATH)
    conn.row_factory = sqlite3.Row
    try:
        yield conn
    finally:
        conn.close()

def init_db():
    schema = """
    CREATE TABLE IF NOT EXISTS user_preferences (
        user_id TEXT PRIMARY KEY,
        channel_ids TEXT NOT NULL,
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
    );
    """
    with get_db_connection() as conn:
        conn.executescript(schema)
        conn.commit()
