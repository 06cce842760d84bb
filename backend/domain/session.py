"""
GameSession - the single mutable value the tick engine and the session
controller operate on.
"""

from typing import List, Optional, Tuple

from .board import Board, Cell
from .constants import STILL, NOT_STARTED, RUNNING, PAUSED, OVER
from .items import Item
from .snake import Snake


class GameSession:
    """
    Everything that changes while a game is played.

    Attributes:
        board: the grid
        snake: the snake, head first
        direction: current movement vector, STILL until the first move
        buffered_direction: pending direction applied on the next tick
        items: items on the board, in spawn order
        score: points collected this session
        best_score: best score across sessions (loaded from the store)
        speed: ticks per second
        phase: one of not_started, running, paused, over
        wrap: whether crossing an edge wraps to the opposite side
        result: None until over, then 'won' or 'lost'
        death_reason: 'wall', 'self', 'hazard' or 'board_full'
        tick_count: ticks that moved the snake
    """

    def __init__(
        self,
        board: Board,
        snake: Snake,
        speed: float,
        best_score: int = 0,
        wrap: bool = False,
    ):
        self.board = board
        self.snake = snake
        self.direction: Tuple[int, int] = STILL
        self.buffered_direction: Optional[Tuple[int, int]] = None
        self.items: List[Item] = []
        self.score = 0
        self.best_score = best_score
        self.speed = speed
        self.phase = NOT_STARTED
        self.wrap = wrap
        self.result: Optional[str] = None
        self.death_reason: Optional[str] = None
        self.tick_count = 0

    @property
    def running(self) -> bool:
        return self.phase == RUNNING

    @property
    def paused(self) -> bool:
        return self.phase == PAUSED

    @property
    def over(self) -> bool:
        return self.phase == OVER

    @property
    def tick_interval_ms(self) -> float:
        return 1000.0 / self.speed

    def item_at(self, cell: Cell) -> Optional[Item]:
        for item in self.items:
            if item.position == cell:
                return item
        return None

    def occupied_cells(self) -> List[Cell]:
        return list(self.snake.positions) + [item.position for item in self.items]

    def __repr__(self):
        return (
            f"<GameSession phase={self.phase} score={self.score} "
            f"length={len(self.snake)} items={len(self.items)} speed={self.speed}>"
        )
