"""
Tests for services/item_spawner.py.
"""

import random
import sys
import os
from collections import Counter

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.board import Board
from domain.items import DEFAULT_ITEM_TYPES, Item, STRAWBERRY
from domain.session import GameSession
from domain.snake import Snake
from services.item_spawner import ItemSpawner


def make_session(grid=5, positions=((2, 2), (1, 2), (0, 2))):
    return GameSession(Board(grid), Snake(list(positions)), speed=6.0)


class TestItemSpawner:
    """Tests for the ItemSpawner class."""

    def test_spawn_one_avoids_snake_and_items(self):
        spawner = ItemSpawner(rng=random.Random(5))
        session = make_session()
        session.items = [Item((4, 4), STRAWBERRY)]

        for _ in range(20):
            item = spawner.spawn_one(session)
            assert item is not None
            assert item.position not in session.snake

        positions = [item.position for item in session.items]
        assert len(positions) == len(set(positions))

    def test_spawn_one_returns_none_when_board_full(self):
        spawner = ItemSpawner(rng=random.Random(5))
        session = make_session(grid=2, positions=[(0, 0), (1, 0), (1, 1)])
        session.items = [Item((0, 1), STRAWBERRY)]

        assert spawner.spawn_one(session) is None
        assert len(session.items) == 1

    def test_fills_the_last_free_cell(self):
        spawner = ItemSpawner(rng=random.Random(5))
        session = make_session(grid=2, positions=[(0, 0), (1, 0), (1, 1)])

        item = spawner.spawn_one(session)

        assert item.position == (0, 1)

    def test_maintain_population_reaches_target(self):
        spawner = ItemSpawner(rng=random.Random(8))
        session = make_session()

        spawned = spawner.maintain_population(session, 4)

        assert spawned == 4
        assert len(session.items) == 4

    def test_maintain_population_stops_silently_when_full(self):
        spawner = ItemSpawner(rng=random.Random(8))
        session = make_session(grid=2, positions=[(0, 0), (1, 0)])

        spawned = spawner.maintain_population(session, 5)

        assert spawned == 2
        assert len(session.items) == 2

    def test_maintain_population_noop_when_stocked(self):
        spawner = ItemSpawner(rng=random.Random(8))
        session = make_session()
        spawner.maintain_population(session, 3)

        assert spawner.maintain_population(session, 3) == 0

    def test_types_follow_weights(self):
        spawner = ItemSpawner(rng=random.Random(99))
        n = 12000
        counts = Counter(spawner.choose_type().id for _ in range(n))
        total = sum(t.spawn_weight for t in DEFAULT_ITEM_TYPES)

        for item_type in DEFAULT_ITEM_TYPES:
            expected = item_type.spawn_weight / total
            assert abs(counts[item_type.id] / n - expected) < 0.02

    def test_cells_are_uniform(self):
        # 3x3 board, snake on one cell: each of the 8 free cells ~ 1/8
        spawner = ItemSpawner(item_types=[STRAWBERRY], rng=random.Random(4))
        counts = Counter()
        for _ in range(8000):
            session = make_session(grid=3, positions=[(1, 1)])
            counts[spawner.spawn_one(session).position] += 1

        assert len(counts) == 8
        for cell, count in counts.items():
            assert abs(count / 8000 - 1 / 8) < 0.03, cell

    def test_requires_item_types(self):
        with pytest.raises(ValueError):
            ItemSpawner(item_types=[])
