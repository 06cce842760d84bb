"""
Greedy player - heads for the closest scoring item.
"""

import random
from typing import Optional, Tuple

from domain.constants import VALID_MOVES
from domain.game_state import GameState
from .base import Player
from .random_player import next_cell, safe_moves


def grid_distance(a, b, size: int, wrap: bool) -> int:
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    if wrap:
        dx = min(dx, size - dx)
        dy = min(dy, size - dy)
    return dx + dy


class GreedyPlayer(Player):
    """
    Picks the safe move that ends closest to the nearest non-lethal item.
    Ties are broken randomly; with no target it wanders like RandomPlayer.
    """

    name = "greedy"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> Tuple[int, int]:
        moves = safe_moves(game_state)
        if not moves:
            return self.rng.choice(sorted(VALID_MOVES))

        targets = [position for position, _, is_lethal in game_state.items if not is_lethal]
        if not targets:
            return self.rng.choice(moves)

        size = game_state.grid_size
        scored = []
        for move in moves:
            cell = next_cell(game_state, move)
            distance = min(grid_distance(cell, t, size, game_state.wrap) for t in targets)
            scored.append((distance, move))

        best = min(distance for distance, _ in scored)
        return self.rng.choice([move for distance, move in scored if distance == best])
