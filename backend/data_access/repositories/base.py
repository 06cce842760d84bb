"""
Base repository with connection management.

Provides a context manager for database connections that handles:
- Automatic connection cleanup
- Transaction commit on success
- Transaction rollback on failure
"""

from contextlib import contextmanager
from typing import Generator, Any

from database import get_connection, init_database


class BaseRepository:
    """
    Base class for all repositories.

    Provides connection management via context manager pattern.
    Subclasses should use self.connection() to get database connections.
    """

    @contextmanager
    def connection(self, auto_commit: bool = True) -> Generator[Any, None, None]:
        """
        Context manager for database connections.

        Automatically handles:
        - Creating the schema if it is missing
        - Committing on successful exit (if auto_commit=True)
        - Rolling back on exception
        - Closing the connection in all cases

        Args:
            auto_commit: If True, commit transaction on successful exit.

        Yields:
            A tuple of (connection, cursor) for database operations.

        Example:
            with self.connection() as (conn, cursor):
                cursor.execute("SELECT value FROM best_scores")
                row = cursor.fetchone()
        """
        init_database()
        conn = get_connection()
        cursor = conn.cursor()
        try:
            yield conn, cursor
            if auto_commit:
                conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            cursor.close()
            conn.close()

    @contextmanager
    def read_connection(self) -> Generator[Any, None, None]:
        """
        Context manager for read-only operations.

        Same as connection() but without a commit.
        """
        with self.connection(auto_commit=False) as handles:
            yield handles
