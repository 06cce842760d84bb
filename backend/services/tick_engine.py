"""
Tick engine - advances a GameSession by exactly one step.

One tick:
  1) apply the buffered direction (re-checked against the reversal rule)
  2) do nothing while the snake has no direction yet
  3) compute the candidate head
  4) wrap it, or end the game on a wall
  5) end the game if it lands on the snake
  6) move the head
  7) resolve items (lethal -> game over, scoring -> grow + speed up + restock)
     or drop the tail
  8) end the game as a win once the snake fills the board
"""

import logging
from typing import List

from config import GameSettings
from domain.constants import STILL, RUNNING, OVER
from domain.direction import is_allowed
from domain.events import GameEvent, ItemConsumed, HazardTriggered
from domain.session import GameSession
from services.item_spawner import ItemSpawner

logger = logging.getLogger(__name__)


def end_session(session: GameSession, reason: str, result: str = "lost") -> None:
    session.phase = OVER
    session.result = result
    session.death_reason = reason
    session.buffered_direction = None
    logger.info(
        f"Game over after {session.tick_count} ticks: {reason} "
        f"(score {session.score}, length {len(session.snake)})"
    )


def apply_buffered_direction(session: GameSession) -> None:
    pending = session.buffered_direction
    if pending is None:
        return
    if is_allowed(session.direction, pending, session.snake):
        session.direction = pending
    else:
        logger.debug(f"Dropped buffered direction {pending} at apply time")
    session.buffered_direction = None


def tick(session: GameSession, spawner: ItemSpawner, settings: GameSettings) -> List[GameEvent]:
    """
    Execute one tick and return the visual-feedback events it produced.

    Ticks on a session that is not running are ignored.
    """
    events: List[GameEvent] = []
    if session.phase != RUNNING:
        return events

    apply_buffered_direction(session)

    if session.direction == STILL:
        return events

    hx, hy = session.snake.head
    dx, dy = session.direction
    candidate = (hx + dx, hy + dy)

    if session.wrap:
        candidate = session.board.wrap(candidate)
    elif not session.board.in_bounds(candidate):
        end_session(session, "wall")
        return events

    if candidate in session.snake:
        end_session(session, "self")
        return events

    session.snake.grow_head(candidate)
    session.tick_count += 1

    item = session.item_at(candidate)
    if item is not None:
        session.items.remove(item)
        if item.type.is_lethal:
            events.append(HazardTriggered(position=candidate, item_type=item.type))
            end_session(session, "hazard")
            return events

        session.score += item.type.score_value
        session.speed = min(settings.max_speed, round(session.speed + settings.speed_step, 3))
        events.append(ItemConsumed(position=candidate, item_type=item.type))
        spawner.maintain_population(session, settings.item_target)
    else:
        session.snake.drop_tail()

    assert len(set(session.snake.positions)) == len(session.snake), "snake overlaps itself"

    if len(session.snake) >= session.board.capacity:
        end_session(session, "board_full", result="won")

    return events
