"""
Domain entities for the Fluffy Snake game engine.

This module contains the core game entities that are independent of
infrastructure concerns (storage, rendering, input devices).
"""

from .constants import UP, DOWN, LEFT, RIGHT, STILL, VALID_MOVES, DIRECTION_NAMES
from .board import Board
from .items import ItemType, Item, DEFAULT_ITEM_TYPES, choose_weighted
from .snake import Snake
from .direction import queue_direction, is_allowed
from .events import GameEvent, ItemConsumed, HazardTriggered, GameOver, SessionReset
from .session import GameSession
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'STILL', 'VALID_MOVES', 'DIRECTION_NAMES',
    'Board',
    'ItemType', 'Item', 'DEFAULT_ITEM_TYPES', 'choose_weighted',
    'Snake',
    'queue_direction', 'is_allowed',
    'GameEvent', 'ItemConsumed', 'HazardTriggered', 'GameOver', 'SessionReset',
    'GameSession',
    'GameState',
]
