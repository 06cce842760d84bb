"""
Direction buffering rules.

Input arrives between ticks; at most one direction is pending and the
last accepted request wins.
"""

from typing import Optional, Tuple

from .constants import STILL, VALID_MOVES, opposite
from .snake import Snake

Direction = Tuple[int, int]


def is_allowed(current: Direction, requested: Direction, snake: Snake) -> bool:
    """
    Decide whether `requested` may replace `current`.

    Before the first move the request is refused only if it would put the
    head straight into the body. Once moving, an exact reversal is refused
    for any snake longer than one cell.
    """
    if requested not in VALID_MOVES:
        return False

    if current == STILL:
        hx, hy = snake.head
        dx, dy = requested
        return (hx + dx, hy + dy) not in snake

    if requested == opposite(current) and len(snake) > 1:
        return False

    return True


def queue_direction(
    current: Direction,
    buffered: Optional[Direction],
    requested: Direction,
    snake: Snake,
) -> Optional[Direction]:
    """Return the new buffered direction after a request."""
    if not is_allowed(current, requested, snake):
        return buffered
    return requested
