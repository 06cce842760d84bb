#!/usr/bin/env python3
"""
CLI tool to record an autopilot game of Fluffy Snake as an MP4 video

The game runs on a synthetic clock: every video frame feeds 1000/fps ms to
the fixed-step scheduler, so zero, one or several ticks may happen between
frames, exactly as in an interactive front end.

Usage:
    python record_game.py
    python record_game.py --player random --seed 7 --output ./snake.mp4
    python record_game.py --fps 60 --canvas 480 --wrap
"""

import os
import sys
import random
import argparse
import logging
from dataclasses import replace

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

from config import load_settings
from main import SnakeGame
from players.variant_registry import get_player_class, AVAILABLE_VARIANTS
from services.frame_renderer import SnakeFrameRenderer, DEFAULT_FPS
from services.particles import ParticleSystem
from services.sizing import grid_size_for_width

# Load environment variables
load_dotenv()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

END_HOLD_SECONDS = 1.5


def record_frames(game: SnakeGame, renderer: SnakeFrameRenderer, variant=None,
                  max_seconds: float = 120.0, seed=None):
    """
    Play one game and return the rendered frames.

    Args:
        game: a SnakeGame that has been reset
        renderer: frame renderer (its fps drives the synthetic clock)
        variant: autopilot variant key
        max_seconds: stop recording after this much game time
        seed: seed for the autopilot and the particle effects
    """
    player = get_player_class(variant)(rng=random.Random(seed))
    particles = ParticleSystem(cell_size=renderer.cell_size(game.session.board.size), seed=seed)
    game.add_listener(particles)

    frame_ms = 1000.0 / renderer.fps
    max_frames = int(max_seconds * renderer.fps)
    hold_frames = int(END_HOLD_SECONDS * renderer.fps)

    frames = []
    try:
        for frame_idx in range(max_frames):
            if not game.session.over:
                game.submit_direction(player.get_move(game.get_current_state()))
                game.advance(frame_ms)
            particles.update(frame_ms)
            frames.append(renderer.render_frame(game.get_current_state(), particles))

            if game.session.over:
                hold_frames -= 1
                if hold_frames <= 0:
                    break

            if frame_idx and frame_idx % (renderer.fps * 10) == 0:
                logger.info(f"Recorded {frame_idx} frames, score {game.session.score}")
    finally:
        game.remove_listener(particles)

    return frames


def main():
    parser = argparse.ArgumentParser(
        description='Record an autopilot Fluffy Snake game as an MP4 video',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--player', type=str, default=None, choices=AVAILABLE_VARIANTS,
                        help='Autopilot variant (default: greedy)')
    parser.add_argument('--output', '-o', type=str, default=None,
                        help='Output video file path (default: temp directory)')
    parser.add_argument('--fps', type=int, default=DEFAULT_FPS,
                        help=f'Frames per second (default: {DEFAULT_FPS})')
    parser.add_argument('--canvas', type=int, default=680,
                        help='Canvas size in pixels; small canvases get smaller grids (default: 680)')
    parser.add_argument('--seed', type=int, default=None, help='Random seed')
    parser.add_argument('--wrap', action='store_true', help='Wrap around the edges')
    parser.add_argument('--max-seconds', type=float, default=120.0,
                        help='Stop recording after this much game time (default: 120)')

    args = parser.parse_args()

    try:
        settings = load_settings()
        if args.wrap:
            settings = replace(settings, wrap=True)

        game = SnakeGame(settings=settings, seed=args.seed, persist=False)
        game.reset(grid_size_for_width(args.canvas, settings.grid_size))

        renderer = SnakeFrameRenderer(canvas_px=args.canvas, fps=args.fps)

        logger.info(f"Recording a {game.session.board.size}x{game.session.board.size} game...")
        frames = record_frames(game, renderer, variant=args.player,
                               max_seconds=args.max_seconds, seed=args.seed)

        video_path = renderer.write_video(frames, args.output)
        logger.info(f"[OK] Video written: {video_path} (score {game.session.score})")

    except KeyboardInterrupt:
        logger.info("\nCancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
