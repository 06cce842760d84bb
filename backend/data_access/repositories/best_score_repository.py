"""
Best-score repository for the single persisted high score.
"""

from typing import Optional

from .base import BaseRepository


class BestScoreRepository(BaseRepository):
    """
    Repository for the best_scores table.

    Each row is one named integer; the game only uses one key.
    """

    def get(self, key: str) -> Optional[int]:
        with self.read_connection() as (conn, cursor):
            cursor.execute("SELECT value FROM best_scores WHERE key = ?", (key,))
            row = cursor.fetchone()
            if row is None:
                return None
            return int(row["value"])

    def upsert(self, key: str, value: int) -> None:
        if value < 0:
            raise ValueError(f"Best score must not be negative, got {value}")
        with self.connection() as (conn, cursor):
            cursor.execute("""
                INSERT INTO best_scores (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
            """, (key, value))

    def delete(self, key: str) -> bool:
        with self.connection() as (conn, cursor):
            cursor.execute("DELETE FROM best_scores WHERE key = ?", (key,))
            return cursor.rowcount > 0
