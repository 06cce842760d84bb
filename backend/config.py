"""
Game configuration.

Defaults live in domain.constants; any of them can be overridden through
environment variables (a .env file is honoured via python-dotenv):

    SNAKE_GRID_SIZE, SNAKE_BASE_SPEED, SNAKE_SPEED_STEP, SNAKE_MAX_SPEED,
    SNAKE_ITEM_TARGET, SNAKE_WRAP
"""

import os
from dataclasses import dataclass, replace
from typing import Optional

from dotenv import load_dotenv

from domain.constants import (
    GRID_SIZE,
    MIN_GRID_SIZE,
    BASE_SPEED,
    SPEED_STEP,
    MAX_SPEED,
    INITIAL_LENGTH,
    ITEM_TARGET,
)

load_dotenv()

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class GameSettings:
    grid_size: int = GRID_SIZE
    base_speed: float = BASE_SPEED
    speed_step: float = SPEED_STEP
    max_speed: float = MAX_SPEED
    item_target: int = ITEM_TARGET
    wrap: bool = False
    initial_length: int = INITIAL_LENGTH

    def validate(self) -> "GameSettings":
        if self.grid_size < MIN_GRID_SIZE:
            raise ValueError(
                f"grid_size must be at least {MIN_GRID_SIZE}, got {self.grid_size}"
            )
        if self.initial_length < 1 or self.initial_length > self.grid_size // 2 + 1:
            raise ValueError(
                f"initial_length {self.initial_length} does not fit a {self.grid_size} grid"
            )
        if self.base_speed <= 0 or self.max_speed < self.base_speed:
            raise ValueError(
                f"Invalid speed range: base={self.base_speed}, max={self.max_speed}"
            )
        if self.speed_step < 0:
            raise ValueError(f"speed_step must not be negative, got {self.speed_step}")
        if self.item_target < 0:
            raise ValueError(f"item_target must not be negative, got {self.item_target}")
        return self

    def with_grid_size(self, grid_size: Optional[int]) -> "GameSettings":
        if grid_size is None:
            return self
        return replace(self, grid_size=grid_size).validate()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in TRUTHY


def load_settings() -> GameSettings:
    """
    Build GameSettings from the environment.

    Raises:
        ValueError: if a variable is malformed or the result is inconsistent
    """
    return GameSettings(
        grid_size=_env_int("SNAKE_GRID_SIZE", GRID_SIZE),
        base_speed=_env_float("SNAKE_BASE_SPEED", BASE_SPEED),
        speed_step=_env_float("SNAKE_SPEED_STEP", SPEED_STEP),
        max_speed=_env_float("SNAKE_MAX_SPEED", MAX_SPEED),
        item_target=_env_int("SNAKE_ITEM_TARGET", ITEM_TARGET),
        wrap=_env_bool("SNAKE_WRAP", False),
    ).validate()
