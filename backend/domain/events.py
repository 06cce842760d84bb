"""
Visual-feedback events emitted by the core.

The presentation layer renders transient effects from these; the core
never waits on them.
"""

from dataclasses import dataclass
from typing import Optional

from .board import Cell
from .items import ItemType


@dataclass(frozen=True)
class GameEvent:
    pass


@dataclass(frozen=True)
class ItemConsumed(GameEvent):
    position: Cell
    item_type: ItemType


@dataclass(frozen=True)
class HazardTriggered(GameEvent):
    position: Cell
    item_type: ItemType


@dataclass(frozen=True)
class GameOver(GameEvent):
    final_score: int
    is_new_best: bool
    result: Optional[str] = None


@dataclass(frozen=True)
class SessionReset(GameEvent):
    """Sent to listeners so they can drop visual state."""
    grid_size: int
