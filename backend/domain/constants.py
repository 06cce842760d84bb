"""
Game constants for Fluffy Snake.

Directions are screen-space unit vectors: x grows to the right and y grows
downwards, so UP is (0, -1).
"""

# Movement directions
UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)
STILL = (0, 0)  # not moving yet
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

DIRECTION_NAMES = {
    UP: "UP",
    DOWN: "DOWN",
    LEFT: "LEFT",
    RIGHT: "RIGHT",
    STILL: "STILL",
}

# Game settings
GRID_SIZE = 20
MIN_GRID_SIZE = 4
BASE_SPEED = 6.0      # ticks per second
SPEED_STEP = 0.25     # added per item eaten
MAX_SPEED = 18.0
INITIAL_LENGTH = 3
ITEM_TARGET = 3

# Session phases
NOT_STARTED = "not_started"
RUNNING = "running"
PAUSED = "paused"
OVER = "over"

# Durable store key for the best score
BEST_SCORE_KEY = "fluffy_snake_best"


def opposite(direction):
    """Return the reverse of a direction vector."""
    dx, dy = direction
    return (-dx, -dy)
