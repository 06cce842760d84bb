"""
Tests for the frame renderer and the recording CLI.
"""

import random
import sys
import os
from unittest.mock import patch

import pytest
from PIL import Image

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import GameSettings
from domain.game_state import GameState
from main import SnakeGame
from services.frame_renderer import SnakeFrameRenderer, SCORE_BAR_PX, mix_colors, ColorScheme
from services.particles import ParticleSystem, hex_to_rgb
from cli.record_game import record_frames


def make_state(**overrides):
    values = dict(
        tick_count=0,
        snake_positions=[(6, 5), (5, 5), (4, 5)],
        items=[((1, 1), "strawberry", False), ((8, 8), "bomb", True)],
        score=3,
        best_score=10,
        speed=6.25,
        grid_size=10,
        running=True,
    )
    values.update(overrides)
    return GameState(**values)


class TestSnakeFrameRenderer:
    """Tests for SnakeFrameRenderer."""

    def test_frame_size_includes_score_bar(self):
        renderer = SnakeFrameRenderer(canvas_px=200)
        frame = renderer.render_frame(make_state())

        assert isinstance(frame, Image.Image)
        assert frame.mode == "RGB"
        assert frame.size == (200, 200 + SCORE_BAR_PX)

    def test_snake_is_drawn_in_its_cell(self):
        renderer = SnakeFrameRenderer(canvas_px=200)
        frame = renderer.render_frame(make_state())

        # Center of the head cell (6, 5), 20 px cells
        center = (6 * 20 + 10, SCORE_BAR_PX + 5 * 20 + 10)
        assert frame.getpixel(center) != hex_to_rgb(ColorScheme.BOARD)

    def test_particles_are_composited(self):
        renderer = SnakeFrameRenderer(canvas_px=200)
        state = make_state(items=[])
        particles = ParticleSystem(cell_size=renderer.cell_size(10), seed=1)
        particles.spawn_burst((1, 8), ["#000000"], 10)

        plain = renderer.render_frame(state)
        with_particles = renderer.render_frame(state, particles)

        assert plain.tobytes() != with_particles.tobytes()

    @pytest.mark.parametrize("flags", [
        dict(running=False),
        dict(running=False, paused=True),
        dict(running=False, over=True, result="lost"),
        dict(running=False, over=True, result="won"),
    ])
    def test_overlays_render(self, flags):
        renderer = SnakeFrameRenderer(canvas_px=160)
        frame = renderer.render_frame(make_state(**flags))
        assert frame.size == (160, 160 + SCORE_BAR_PX)

    def test_mix_colors(self):
        assert mix_colors("#000000", "#ffffff", 0) == (0, 0, 0)
        assert mix_colors("#000000", "#ffffff", 1) == (255, 255, 255)
        assert mix_colors("#000000", "#646464") == (50, 50, 50)

    @patch("services.frame_renderer.ImageSequenceClip")
    def test_write_video(self, mock_clip_class, tmp_path):
        renderer = SnakeFrameRenderer(canvas_px=100, fps=12)
        frames = [renderer.render_frame(make_state()) for _ in range(3)]
        output = tmp_path / "out" / "game.mp4"

        path = renderer.write_video(frames, str(output))

        assert path == str(output)
        assert output.parent.is_dir()
        args, kwargs = mock_clip_class.call_args
        assert len(args[0]) == 3
        assert kwargs["fps"] == 12
        mock_clip_class.return_value.write_videofile.assert_called_once_with(
            str(output), codec="libx264", audio=False, logger=None
        )

    def test_write_video_requires_frames(self):
        with pytest.raises(ValueError):
            SnakeFrameRenderer().write_video([])


class TestRecordFrames:
    """Tests for cli/record_game.record_frames."""

    def test_records_until_game_over_plus_hold(self):
        game = SnakeGame(settings=GameSettings(grid_size=6), seed=2, persist=False)
        game.reset()
        renderer = SnakeFrameRenderer(canvas_px=120, fps=10)

        frames = record_frames(game, renderer, variant="random", max_seconds=600, seed=2)

        if game.session.over:
            # 1.5 s hold on the final board
            assert len(frames) >= 15
        else:
            assert len(frames) == 6000
        assert frames[-1].size == (120, 120 + SCORE_BAR_PX)
        assert game.listeners == []

    def test_stops_at_max_seconds(self):
        game = SnakeGame(settings=GameSettings(wrap=True, item_target=0), seed=2, persist=False)
        game.reset()
        renderer = SnakeFrameRenderer(canvas_px=100, fps=5)

        frames = record_frames(game, renderer, variant="greedy", max_seconds=2, seed=2)

        assert len(frames) == 10
