"""
Database configuration and schema management for Fluffy Snake.

The only durable state is the best score, kept in a small SQLite file.
"""

import os
import sqlite3
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()
logger = logging.getLogger(__name__)


def get_database_path() -> str:
    """
    Determine the SQLite database path.

    Returns:
        Path to the SQLite database file.
        - SNAKE_DB_PATH if set
        - otherwise backend/fluffy_snake.db
    """
    db_path = os.getenv('SNAKE_DB_PATH')
    if db_path:
        parent = os.path.dirname(db_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        return db_path

    backend_dir = Path(__file__).parent
    return str(backend_dir / 'fluffy_snake.db')


def get_connection() -> sqlite3.Connection:
    """
    Get a database connection with appropriate settings.

    Returns:
        sqlite3.Connection: Database connection with row factory enabled.
    """
    conn = sqlite3.connect(get_database_path(), timeout=5)
    conn.row_factory = sqlite3.Row  # Enable column access by name
    return conn


def init_database() -> None:
    """
    Initialize the database schema.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = get_connection()
    cursor = conn.cursor()

    try:
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS best_scores (
                key TEXT PRIMARY KEY,
                value INTEGER NOT NULL DEFAULT 0 CHECK(value >= 0),
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        conn.commit()
        logger.debug(f"Database schema ready at {get_database_path()}")

    except Exception as e:
        conn.rollback()
        logger.error(f"Error initializing database: {e}")
        raise
    finally:
        cursor.close()
        conn.close()


if __name__ == "__main__":
    # Allow running this module directly to initialize the database
    init_database()
    print(f"Database ready at: {get_database_path()}")
