"""
Data access layer for Fluffy Snake.

The only durable state is the best score.
"""

from .best_score import load_best_score, save_best_score, clear_best_score

__all__ = [
    'load_best_score',
    'save_best_score',
    'clear_best_score',
]
