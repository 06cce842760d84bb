"""
GameState entity - a read-only snapshot of the game at a point in time.
"""

from typing import Any, Dict, List, Optional, Tuple

ITEM_GLYPHS = {
    "strawberry": "A",
    "cherry": "C",
    "cake": "K",
    "star": "*",
    "bomb": "X",
}


class GameState:
    """
    A snapshot of the game handed to renderers and players.

    Attributes:
        tick_count: ticks that moved the snake so far
        snake_positions: list of (x, y), head first
        items: list of ((x, y), type_id, is_lethal)
        score, best_score: current and best scores
        speed: ticks per second
        grid_size: board dimension (the board is square)
        direction: current movement vector
        running, paused, over: phase flags
        result: None, 'won' or 'lost'
        wrap: whether edges wrap
    """

    def __init__(
        self,
        tick_count: int,
        snake_positions: List[Tuple[int, int]],
        items: List[Tuple[Tuple[int, int], str, bool]],
        score: int,
        best_score: int,
        speed: float,
        grid_size: int,
        direction: Tuple[int, int] = (0, 0),
        running: bool = False,
        paused: bool = False,
        over: bool = False,
        result: Optional[str] = None,
        wrap: bool = False,
    ):
        self.tick_count = tick_count
        self.snake_positions = snake_positions
        self.items = items
        self.score = score
        self.best_score = best_score
        self.speed = speed
        self.grid_size = grid_size
        self.direction = direction
        self.running = running
        self.paused = paused
        self.over = over
        self.result = result
        self.wrap = wrap

    @property
    def width(self) -> int:
        return self.grid_size

    @property
    def height(self) -> int:
        return self.grid_size

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        @ = snake head
        T = snake body
        A/C/K/* = scoring items, X = lethal item
        Rows run top to bottom with (0,0) at top left and x-axis labels at bottom
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        for (ix, iy), type_id, is_lethal in self.items:
            board[iy][ix] = 'X' if is_lethal else ITEM_GLYPHS.get(type_id, 'I')

        for pos_idx, (x, y) in enumerate(self.snake_positions):
            board[y][x] = '@' if pos_idx == 0 else 'T'

        result = []
        for y in range(self.height):
            result.append(f"{y:2d} {' '.join(board[y])}")

        # Single-digit labels keep columns aligned on 20-wide boards
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tick_count": self.tick_count,
            "snake": [list(cell) for cell in self.snake_positions],
            "items": [
                {"position": list(position), "type": type_id, "lethal": is_lethal}
                for position, type_id, is_lethal in self.items
            ],
            "score": self.score,
            "best_score": self.best_score,
            "speed": self.speed,
            "grid_size": self.grid_size,
            "direction": list(self.direction),
            "running": self.running,
            "paused": self.paused,
            "over": self.over,
            "result": self.result,
            "wrap": self.wrap,
        }

    @classmethod
    def from_session(cls, session) -> "GameState":
        return cls(
            tick_count=session.tick_count,
            snake_positions=list(session.snake.positions),
            items=[
                (item.position, item.type.id, item.type.is_lethal)
                for item in session.items
            ],
            score=session.score,
            best_score=session.best_score,
            speed=session.speed,
            grid_size=session.board.size,
            direction=session.direction,
            running=session.running,
            paused=session.paused,
            over=session.over,
            result=session.result,
            wrap=session.wrap,
        )

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_count}, items={len(self.items)}, "
            f"length={len(self.snake_positions)}, score={self.score}>"
        )
