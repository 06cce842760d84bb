"""
Player implementations for Fluffy Snake.

Autopilots used by the CLI and the recorder, plus the keyboard/touch
mapping used by interactive front ends.
"""

from .base import Player
from .random_player import RandomPlayer
from .greedy_player import GreedyPlayer
from .variant_registry import get_player_class, list_variants, AVAILABLE_VARIANTS
from .input_mapping import direction_for_key, direction_from_swipe, handle_key, handle_swipe

__all__ = [
    'Player',
    'RandomPlayer',
    'GreedyPlayer',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
    'direction_for_key',
    'direction_from_swipe',
    'handle_key',
    'handle_swipe',
]
