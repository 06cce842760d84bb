"""
Item types, item instances and weighted type selection.
"""

from dataclasses import dataclass
from typing import Any, Sequence, Tuple

from .board import Cell


@dataclass(frozen=True)
class ItemType:
    """
    Immutable descriptor for a collectible.

    Attributes:
        id: stable identifier, e.g. 'strawberry'
        score_value: points awarded on consumption
        spawn_weight: relative (not normalized) spawn weight, > 0
        is_lethal: consuming it ends the game instead of scoring
        palette: hex colors used by the presentation layer
    """
    id: str
    score_value: int
    spawn_weight: float
    is_lethal: bool = False
    palette: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Item:
    position: Cell
    type: ItemType

    @property
    def type_id(self) -> str:
        return self.type.id


STRAWBERRY = ItemType("strawberry", 1, 40, palette=("#ffb6d0", "#ff8fab", "#fff1f8"))
CHERRY = ItemType("cherry", 2, 25, palette=("#ff6b81", "#ffd8a8", "#ffe6f0"))
CAKE = ItemType("cake", 3, 12, palette=("#fff1c9", "#ffd67a", "#ffd8a8"))
STAR = ItemType("star", 5, 5, palette=("#fff3a0", "#ffe066", "#bff3ff"))
BOMB = ItemType("bomb", 0, 18, is_lethal=True, palette=("#5b5f73", "#a0a4b8", "#ff9f43"))

DEFAULT_ITEM_TYPES = (STRAWBERRY, CHERRY, CAKE, STAR, BOMB)


def choose_weighted(pairs: Sequence[Tuple[Any, float]], rng) -> Any:
    """
    Pick one value from (value, weight) pairs with probability
    weight / sum(weights).

    Args:
        pairs: ordered (value, weight) pairs, every weight > 0
        rng: a random.Random-like source (only .random() is used)

    Raises:
        ValueError: if pairs is empty or a weight is not positive
    """
    if not pairs:
        raise ValueError("Cannot choose from an empty weight table")

    total = 0.0
    for value, weight in pairs:
        if weight <= 0:
            raise ValueError(f"Weight for {value!r} must be positive, got {weight}")
        total += weight

    threshold = rng.random() * total
    cumulative = 0.0
    for value, weight in pairs:
        cumulative += weight
        if threshold < cumulative:
            return value

    # Float rounding can leave threshold == total
    return pairs[-1][0]


def weight_table(item_types: Sequence[ItemType]):
    return [(item_type, item_type.spawn_weight) for item_type in item_types]
