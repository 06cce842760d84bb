"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Tuple


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
    """

    def __init__(self, positions: List[Tuple[int, int]]):
        if not positions:
            raise ValueError("A snake needs at least one segment")
        if len(set(positions)) != len(positions):
            raise ValueError(f"Snake segments overlap: {positions}")
        self.positions = deque(positions)

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Tuple[int, int]:
        return self.positions[-1]

    def __len__(self):
        return len(self.positions)

    def __contains__(self, cell):
        return cell in self.positions

    def grow_head(self, cell: Tuple[int, int]) -> None:
        self.positions.appendleft(cell)

    def drop_tail(self) -> Tuple[int, int]:
        return self.positions.pop()

    @classmethod
    def centered(cls, grid_size: int, length: int = 3) -> "Snake":
        """
        Build a horizontal snake in the middle row, head pointing right.

        For a 20 grid and length 3 this is [(11, 10), (10, 10), (9, 10)].
        """
        center = grid_size // 2
        head_x = center + 1
        return cls([(head_x - i, center) for i in range(length)])

    def __repr__(self):
        return f"<Snake length={len(self.positions)} head={self.head}>"
