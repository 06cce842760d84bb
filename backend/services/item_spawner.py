"""
Item spawning: places items on free cells using weighted type selection.
"""

import logging
import random
from typing import Optional, Sequence

from domain.items import DEFAULT_ITEM_TYPES, Item, ItemType, choose_weighted, weight_table
from domain.session import GameSession

logger = logging.getLogger(__name__)


class ItemSpawner:
    """
    Keeps the board stocked with items.

    A full board is a normal state: spawn_one returns None and
    maintain_population simply stops.
    """

    def __init__(
        self,
        item_types: Sequence[ItemType] = DEFAULT_ITEM_TYPES,
        rng: Optional[random.Random] = None,
    ):
        if not item_types:
            raise ValueError("ItemSpawner needs at least one item type")
        self.item_types = tuple(item_types)
        self.rng = rng or random.Random()
        self._weights = weight_table(self.item_types)

    def choose_type(self) -> ItemType:
        return choose_weighted(self._weights, self.rng)

    def spawn_one(self, session: GameSession) -> Optional[Item]:
        free = session.board.free_cells(session.occupied_cells())
        if not free:
            logger.debug("No free cell left for an item")
            return None

        cell = free[self.rng.randrange(len(free))]
        item = Item(position=cell, type=self.choose_type())
        assert cell not in session.snake, f"item spawned on snake at {cell}"
        session.items.append(item)
        return item

    def maintain_population(self, session: GameSession, target: int) -> int:
        """Spawn until `target` items are on the board or no cell is free."""
        spawned = 0
        while len(session.items) < target:
            if self.spawn_one(session) is None:
                break
            spawned += 1
        return spawned
