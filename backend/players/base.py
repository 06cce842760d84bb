"""
Base player interface for the game engine.
"""

from typing import Tuple

from domain.game_state import GameState


class Player:
    """
    Base class/interface for autopilot logic.

    A player looks at a snapshot and returns the direction it wants the
    snake to take next.
    """

    name = "player"

    def get_move(self, game_state: GameState) -> Tuple[int, int]:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: UP, DOWN, LEFT, RIGHT
        """
        raise NotImplementedError
