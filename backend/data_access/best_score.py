"""
Best-score persistence functions.

These functions delegate to the BestScoreRepository for actual database
operations. They raise on storage failures; callers decide how much
durability matters.
"""

from domain.constants import BEST_SCORE_KEY

from .repositories import BestScoreRepository

# Repository instance
_best_score_repo = BestScoreRepository()


def load_best_score(key: str = BEST_SCORE_KEY) -> int:
    """
    Return the stored best score, or 0 if none was saved yet.
    """
    value = _best_score_repo.get(key)
    return value if value is not None else 0


def save_best_score(score: int, key: str = BEST_SCORE_KEY) -> None:
    """
    Persist a new best score.

    Args:
        score: the new best, >= 0
        key: name of the stored value
    """
    _best_score_repo.upsert(key, int(score))


def clear_best_score(key: str = BEST_SCORE_KEY) -> bool:
    """Remove the stored best score. Returns True if a row was deleted."""
    return _best_score_repo.delete(key)
