"""
Sizing provider - turns viewport dimensions into a canvas size and a grid
size. The core only ever sees the resulting grid size.
"""

from domain.constants import GRID_SIZE

MAX_CANVAS_PX = 680
HORIZONTAL_MARGIN_PX = 80
VERTICAL_MARGIN_PX = 220  # header + score bar + controls
MAX_DEVICE_PIXEL_RATIO = 2


def fit_canvas(viewport_width: float, viewport_height: float) -> float:
    """Return the side length of the square canvas in CSS pixels."""
    size = min(MAX_CANVAS_PX, min(viewport_width - HORIZONTAL_MARGIN_PX,
                                  viewport_height - VERTICAL_MARGIN_PX))
    return max(0.0, float(size))


def backing_store_size(canvas_px: float, device_pixel_ratio: float = 1.0) -> int:
    """Internal resolution for a crisp canvas on high-density screens."""
    dpr = min(device_pixel_ratio or 1, MAX_DEVICE_PIXEL_RATIO)
    return int(canvas_px * dpr)


def grid_size_for_width(canvas_px: float, base_grid: int = GRID_SIZE) -> int:
    """Smaller canvases get fewer cells to stay playable."""
    if canvas_px <= 320:
        return max(12, base_grid - 6)
    if canvas_px <= 480:
        return max(16, base_grid - 4)
    return base_grid


def cell_size(canvas_px: float, grid_size: int) -> float:
    return canvas_px / grid_size
