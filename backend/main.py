import argparse
import json
import logging
import random
import sqlite3
from dataclasses import replace
from typing import Callable, Dict, List, Optional, Tuple, Any

from config import GameSettings, load_settings
from data_access import load_best_score, save_best_score
from domain.constants import NOT_STARTED, PAUSED, RUNNING, DIRECTION_NAMES
from domain.direction import is_allowed, queue_direction
from domain.events import GameEvent, GameOver, ItemConsumed, SessionReset
from domain.board import Board
from domain.game_state import GameState
from domain.session import GameSession
from domain.snake import Snake
from players.variant_registry import get_player_class, AVAILABLE_VARIANTS
from services.item_spawner import ItemSpawner
from services.scheduler import FixedStepScheduler
from services.tick_engine import tick

logger = logging.getLogger(__name__)

Listener = Callable[[GameEvent], None]


class SnakeGame:
    """
    Session controller. Manages:
      - reset / start / pause / game-over transitions
      - the fixed-step tick clock
      - the best score (in memory and in the durable store)
      - visual-feedback listeners

    Input sources call the submit_* methods; renderers read
    get_current_state(). Nothing else mutates the session.
    """

    def __init__(
        self,
        settings: Optional[GameSettings] = None,
        spawner: Optional[ItemSpawner] = None,
        seed: Optional[int] = None,
        persist: bool = True,
    ):
        self.settings = (settings or load_settings()).validate()
        self.rng = random.Random(seed)
        self.spawner = spawner or ItemSpawner(rng=self.rng)
        self.persist = persist
        self.wrap = self.settings.wrap
        self.listeners: List[Listener] = []

        self.best_score = self._load_best_score()
        self.session: Optional[GameSession] = None
        self.session_settings = self.settings
        self._game_over_handled = False

        self.scheduler = FixedStepScheduler(
            step=self.step,
            interval_ms=lambda: self.session.tick_interval_ms,
            is_active=lambda: self.session is not None and self.session.running,
        )
        self.reset()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self, grid_size: Optional[int] = None) -> GameSession:
        """
        Start a fresh session: centered 3-segment snake, zero score, base
        speed, a full item population. The session waits for input.
        """
        settings = self.settings.with_grid_size(grid_size)
        self.session_settings = settings

        session = GameSession(
            board=Board(settings.grid_size),
            snake=Snake.centered(settings.grid_size, settings.initial_length),
            speed=settings.base_speed,
            best_score=self.best_score,
            wrap=self.wrap,
        )
        self.session = session
        self._game_over_handled = False
        self.scheduler.reset()

        self.spawner.maintain_population(session, settings.item_target)
        logger.debug(f"Reset session on a {settings.grid_size} grid with {len(session.items)} items")

        self._emit(SessionReset(grid_size=settings.grid_size))
        return session

    def start(self) -> None:
        """NotStarted/Paused -> Running. A finished game needs a reset first."""
        if self.session.phase in (NOT_STARTED, PAUSED):
            self.session.phase = RUNNING
            self.scheduler.reset()

    def toggle_pause(self) -> None:
        if self.session.phase == RUNNING:
            self.session.phase = PAUSED
            self.scheduler.reset()
        elif self.session.phase == PAUSED:
            self.start()

    def retry(self, grid_size: Optional[int] = None) -> GameSession:
        session = self.reset(grid_size)
        self.start()
        return session

    def go_home(self) -> GameSession:
        """Back to the start panel: a fresh session that is not running."""
        return self.reset()

    def set_wrap(self, enabled: bool) -> None:
        self.wrap = enabled
        self.session.wrap = enabled

    # ------------------------------------------------------------------
    # Input source
    # ------------------------------------------------------------------

    def submit_direction(self, direction: Tuple[int, int]) -> None:
        session = self.session
        if session.over:
            return

        requested = tuple(direction)
        accepted = is_allowed(session.direction, requested, session.snake)
        session.buffered_direction = queue_direction(
            session.direction, session.buffered_direction, requested, session.snake
        )
        if not accepted:
            logger.debug(f"Ignored direction {direction} (current {session.direction})")

        # Arrow keys also resume a paused game; only an accepted one starts a new game
        if session.phase == PAUSED or (session.phase == NOT_STARTED and accepted):
            self.start()

    def submit_start(self) -> None:
        self.start()

    def submit_pause_toggle(self) -> None:
        self.toggle_pause()

    def submit_reset(self, grid_size: Optional[int] = None) -> GameSession:
        return self.reset(grid_size)

    # ------------------------------------------------------------------
    # Clock
    # ------------------------------------------------------------------

    def advance(self, elapsed_ms: float) -> int:
        """Feed elapsed frame time; returns how many ticks ran."""
        return self.scheduler.advance(elapsed_ms)

    def step(self) -> List[GameEvent]:
        """Run exactly one tick."""
        events = tick(self.session, self.spawner, self.session_settings)
        for event in events:
            self._emit(event)
        if self.session.over:
            self.on_game_over()
        return events

    # ------------------------------------------------------------------
    # Game over / best score
    # ------------------------------------------------------------------

    def on_game_over(self) -> None:
        """
        Freeze the session and record a new best score. Storage failures
        only cost durability; the in-memory best still updates.
        """
        if self._game_over_handled:
            return
        self._game_over_handled = True

        session = self.session
        is_new_best = session.score > self.best_score
        if is_new_best:
            self.best_score = session.score
            session.best_score = session.score
            logger.info(f"New best score: {session.score}")
            self._save_best_score(session.score)

        self._emit(GameOver(final_score=session.score, is_new_best=is_new_best, result=session.result))

    def _load_best_score(self) -> int:
        if not self.persist:
            return 0
        try:
            return load_best_score()
        except (sqlite3.Error, OSError) as e:
            logger.warning(f"Could not load best score, starting from 0: {e}")
            return 0

    def _save_best_score(self, score: int) -> None:
        if not self.persist:
            return
        try:
            save_best_score(score)
        except (sqlite3.Error, OSError) as e:
            logger.warning(f"Could not persist best score {score}: {e}")

    # ------------------------------------------------------------------
    # Presentation boundary
    # ------------------------------------------------------------------

    def add_listener(self, listener: Listener) -> None:
        self.listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self.listeners.remove(listener)

    def _emit(self, event: GameEvent) -> None:
        for listener in list(self.listeners):
            try:
                listener(event)
            except Exception as e:  # noqa: BLE001 - effects never break the core
                logger.warning(f"Listener {listener!r} failed on {event!r}: {e}")

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState.from_session(self.session)

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        print("\n" + self.get_current_state().print_board() + "\n")


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(
    game: SnakeGame,
    variant: Optional[str] = None,
    max_ticks: int = 5000,
    show_board: bool = False,
    on_tick: Optional[Callable[[SnakeGame], None]] = None,
) -> Dict[str, Any]:
    """
    Plays one game with an autopilot player.

    Args:
        game: a SnakeGame, reset and ready to start
        variant: player variant key (see players.variant_registry)
        max_ticks: stop after this many ticks even if the snake is alive
        show_board: print the board after every tick
        on_tick: optional hook run after each tick (used by the recorder)

    Returns:
        A dictionary summarizing the game.
    """
    player_class = get_player_class(variant)
    player = player_class(rng=random.Random(game.rng.random()))

    eaten = {"count": 0}

    def count_items(event: GameEvent) -> None:
        if isinstance(event, ItemConsumed):
            eaten["count"] += 1

    game.add_listener(count_items)
    previous_best = game.best_score
    try:
        ticks = 0
        while not game.session.over and ticks < max_ticks:
            state = game.get_current_state()
            move = player.get_move(state)
            game.submit_direction(move)
            game.advance(game.session.tick_interval_ms)
            ticks += 1
            if show_board:
                game.print_board()
            if on_tick is not None:
                on_tick(game)
    finally:
        game.remove_listener(count_items)

    session = game.session
    return {
        "player": player.name,
        "score": session.score,
        "best_score": game.best_score,
        "is_new_best": session.score > previous_best,
        "result": session.result,
        "death_reason": session.death_reason,
        "ticks": session.tick_count,
        "length": len(session.snake),
        "items_eaten": eaten["count"],
        "final_speed": session.speed,
        "direction": DIRECTION_NAMES.get(session.direction),
    }


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def main():
    parser = argparse.ArgumentParser(
        description="Play Fluffy Snake headlessly with an autopilot player."
    )
    parser.add_argument("--player", type=str, default=None, choices=AVAILABLE_VARIANTS,
                        help="Autopilot variant (default: greedy)")
    parser.add_argument("--games", type=int, default=1,
                        help="Number of games to play back to back")
    parser.add_argument("--grid-size", type=int, default=None,
                        help="Board size in cells (default: SNAKE_GRID_SIZE or 20)")
    parser.add_argument("--wrap", action="store_true",
                        help="Wrap around the edges instead of dying on walls")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducible games")
    parser.add_argument("--max-ticks", type=int, default=5000,
                        help="Safety cap on ticks per game")
    parser.add_argument("--show-board", action="store_true",
                        help="Print the board after every tick")
    parser.add_argument("--no-persist", action="store_true",
                        help="Do not read or write the stored best score "
                             "(stored in SNAKE_DB_PATH, default backend/fluffy_snake.db)")
    parser.add_argument("--log-level", type=str, default="INFO",
                        help="Logging level (DEBUG, INFO, WARNING)")

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.games < 1:
        raise ValueError("--games must be at least 1")

    settings = load_settings()
    if args.wrap:
        settings = replace(settings, wrap=True)

    game = SnakeGame(settings=settings, seed=args.seed, persist=not args.no_persist)

    results = []
    for _ in range(args.games):
        game.retry(args.grid_size)
        results.append(run_simulation(
            game,
            variant=args.player,
            max_ticks=args.max_ticks,
            show_board=args.show_board,
        ))
        if not args.show_board:
            game.print_board()

    print("\nSimulation Result Summary:")
    print(json.dumps(results if len(results) > 1 else results[0], indent=2))


if __name__ == "__main__":
    main()
