"""
Particle effects for item and hazard feedback.

A ParticleSystem is an event listener: it turns ItemConsumed and
HazardTriggered events into short-lived bursts and forgets everything on
SessionReset. Positions are in canvas pixels.
"""

import logging
from typing import Optional, Sequence, Tuple

import numpy as np

from domain.events import GameEvent, ItemConsumed, HazardTriggered, SessionReset

logger = logging.getLogger(__name__)

EAT_BURST = 14
HAZARD_BURST = 24
GRAVITY_PER_MS = 0.002
VELOCITY_SCALE = 0.02
FADE_MS = 1000.0
DEFAULT_PALETTE = ("#ffb6d0", "#ffd8a8", "#bff3ff", "#d7ffd2", "#fff1f8")


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


class ParticleSystem:
    """
    Structure-of-arrays particle store.

    Columns: x, y, vx, vy, life (ms left), size (px); colors is an (N, 3)
    uint8 array.
    """

    def __init__(self, cell_size: float = 32.0, seed: Optional[int] = None):
        self.cell_size = cell_size
        self.rng = np.random.default_rng(seed)
        self.clear()

    def clear(self) -> None:
        self.state = np.zeros((0, 6), dtype=float)
        self.colors = np.zeros((0, 3), dtype=np.uint8)

    def __len__(self):
        return self.state.shape[0]

    def spawn_burst(self, cell: Tuple[int, int], palette: Sequence[str], count: int) -> None:
        if count <= 0:
            return
        palette = palette or DEFAULT_PALETTE

        cx = cell[0] * self.cell_size + self.cell_size / 2
        cy = cell[1] * self.cell_size + self.cell_size / 2

        angle = self.rng.uniform(0, 2 * np.pi, count)
        speed = self.rng.uniform(0.6, 2.0, count)
        burst = np.empty((count, 6), dtype=float)
        burst[:, 0] = cx
        burst[:, 1] = cy
        burst[:, 2] = np.cos(angle) * speed
        burst[:, 3] = np.sin(angle) * speed - 0.6  # drift upwards first
        burst[:, 4] = self.rng.uniform(400, 1100, count)
        burst[:, 5] = self.rng.uniform(0, self.cell_size * 0.15, count) + self.cell_size * 0.06

        rgb = np.array([hex_to_rgb(c) for c in palette], dtype=np.uint8)
        picks = rgb[self.rng.integers(0, len(rgb), count)]

        self.state = np.vstack([self.state, burst])
        self.colors = np.vstack([self.colors, picks])

    def update(self, dt_ms: float) -> None:
        if not len(self):
            return
        s = self.state
        s[:, 4] -= dt_ms
        s[:, 3] += GRAVITY_PER_MS * dt_ms
        s[:, 0] += s[:, 2] * dt_ms * VELOCITY_SCALE
        s[:, 1] += s[:, 3] * dt_ms * VELOCITY_SCALE

        alive = s[:, 4] > 0
        self.state = s[alive]
        self.colors = self.colors[alive]

    def alphas(self) -> np.ndarray:
        return np.clip(self.state[:, 4] / FADE_MS, 0.0, 1.0)

    def __call__(self, event: GameEvent) -> None:
        if isinstance(event, ItemConsumed):
            self.spawn_burst(event.position, event.item_type.palette, EAT_BURST)
        elif isinstance(event, HazardTriggered):
            self.spawn_burst(event.position, event.item_type.palette, HAZARD_BURST)
        elif isinstance(event, SessionReset):
            self.clear()
