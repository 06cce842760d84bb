"""
Registry for autopilot players.
Maps variant keys (e.g., 'random', 'greedy') to player classes.
"""

from typing import Callable, Dict, Optional, Type

from .base import Player


def _get_random_player() -> Type[Player]:
    from .random_player import RandomPlayer
    return RandomPlayer


def _get_greedy_player() -> Type[Player]:
    from .greedy_player import GreedyPlayer
    return GreedyPlayer


# Registry: maps variant key -> callable that returns the player class
PLAYER_VARIANT_LOADERS: Dict[str, Callable[[], Type[Player]]] = {
    "random": _get_random_player,
    "greedy": _get_greedy_player,
}

DEFAULT_VARIANT = "greedy"

# Canonical list of available variant keys
AVAILABLE_VARIANTS = list(PLAYER_VARIANT_LOADERS.keys())


def get_player_class(variant_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given variant key.

    Args:
        variant_key: One of 'random', 'greedy'. If None or empty, returns the default.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If variant_key is not recognized.
    """
    if not variant_key or variant_key.strip() == "":
        variant_key = DEFAULT_VARIANT

    variant_key = variant_key.strip().lower()

    if variant_key not in PLAYER_VARIANT_LOADERS:
        available = ", ".join(AVAILABLE_VARIANTS)
        raise ValueError(
            f"Unknown player variant '{variant_key}'. Available variants: {available}"
        )

    return PLAYER_VARIANT_LOADERS[variant_key]()


def list_variants() -> list:
    """
    Return metadata about all available player variants.
    """
    return [
        {"key": "random", "description": "Random safe moves"},
        {"key": "greedy", "description": "Shortest step toward the nearest scoring item"},
    ]
