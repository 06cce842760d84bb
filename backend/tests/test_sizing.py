"""
Tests for the sizing provider.
"""

import sys
import os

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.sizing import fit_canvas, backing_store_size, grid_size_for_width, cell_size


def test_fit_canvas_capped_on_large_screens():
    assert fit_canvas(1920, 1080) == 680


def test_fit_canvas_uses_tighter_axis():
    # width leaves 320, height leaves 580
    assert fit_canvas(400, 800) == 320
    # width leaves 920, height leaves 380
    assert fit_canvas(1000, 600) == 380


def test_fit_canvas_never_negative():
    assert fit_canvas(50, 100) == 0


@pytest.mark.parametrize("canvas,expected", [
    (300, 14),
    (320, 14),
    (400, 16),
    (480, 16),
    (481, 20),
    (680, 20),
])
def test_grid_size_for_width(canvas, expected):
    assert grid_size_for_width(canvas) == expected


def test_backing_store_caps_pixel_ratio():
    assert backing_store_size(400, 1) == 400
    assert backing_store_size(400, 1.5) == 600
    assert backing_store_size(400, 3) == 800


def test_cell_size():
    assert cell_size(680, 20) == 34
