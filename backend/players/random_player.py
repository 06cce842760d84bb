"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional, Tuple

from domain.constants import VALID_MOVES, STILL, opposite
from domain.game_state import GameState
from .base import Player


def next_cell(game_state: GameState, move: Tuple[int, int]) -> Optional[Tuple[int, int]]:
    """Where the head lands for `move`, or None if that is a wall."""
    head_x, head_y = game_state.snake_positions[0]
    new_x, new_y = head_x + move[0], head_y + move[1]
    size = game_state.grid_size
    if game_state.wrap:
        return (new_x % size, new_y % size)
    if new_x < 0 or new_x >= size or new_y < 0 or new_y >= size:
        return None
    return (new_x, new_y)


def safe_moves(game_state: GameState) -> List[Tuple[int, int]]:
    """
    Moves that hit neither a wall, the body, nor a lethal item.

    Falls back to moves that only risk a lethal item when nothing else is
    left.
    """
    body = set(game_state.snake_positions)
    hazards = {position for position, _, is_lethal in game_state.items if is_lethal}

    candidates = []
    for move in sorted(VALID_MOVES):
        if game_state.direction != STILL and move == opposite(game_state.direction):
            continue
        cell = next_cell(game_state, move)
        if cell is None or cell in body:
            continue
        candidates.append((move, cell))

    safe = [move for move, cell in candidates if cell not in hazards]
    return safe or [move for move, _ in candidates]


class RandomPlayer(Player):
    """
    A random AI that picks a direction avoiding walls, itself and bombs.
    """

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> Tuple[int, int]:
        moves = safe_moves(game_state)

        # If no valid moves, just return a random move (we'll die anyway)
        if not moves:
            return self.rng.choice(sorted(VALID_MOVES))

        return self.rng.choice(moves)
