"""
Keyboard and touch input mapping.

Translates raw key names and swipe gestures into direction intents for
SnakeGame.submit_direction.
"""

from typing import Optional, Tuple

from domain.constants import UP, DOWN, LEFT, RIGHT

KEY_DIRECTIONS = {
    "ArrowUp": UP,
    "ArrowDown": DOWN,
    "ArrowLeft": LEFT,
    "ArrowRight": RIGHT,
    "w": UP,
    "s": DOWN,
    "a": LEFT,
    "d": RIGHT,
}

PAUSE_KEYS = {" ", "space"}

SWIPE_DEAD_ZONE_PX = 20


def direction_for_key(key: str) -> Optional[Tuple[int, int]]:
    return KEY_DIRECTIONS.get(key)


def is_pause_key(key: str) -> bool:
    return key in PAUSE_KEYS


def direction_from_swipe(
    dx: float,
    dy: float,
    dead_zone: float = SWIPE_DEAD_ZONE_PX,
) -> Optional[Tuple[int, int]]:
    """
    Turn a touch start->end delta into a direction.

    Short taps inside the dead zone return None. The dominant axis wins;
    on a tie the vertical axis is used.
    """
    adx, ady = abs(dx), abs(dy)
    if max(adx, ady) < dead_zone:
        return None
    if adx > ady:
        return RIGHT if dx > 0 else LEFT
    return DOWN if dy > 0 else UP


def handle_key(game, key: str) -> bool:
    """
    Route a key press to the game. Returns True if the key was recognized.
    """
    direction = direction_for_key(key)
    if direction is not None:
        game.submit_direction(direction)
        return True
    if is_pause_key(key):
        game.submit_pause_toggle()
        return True
    return False


def handle_swipe(game, dx: float, dy: float) -> bool:
    direction = direction_from_swipe(dx, dy)
    if direction is None:
        return False
    game.submit_direction(direction)
    return True
