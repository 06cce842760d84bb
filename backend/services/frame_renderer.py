"""
Frame rendering for Fluffy Snake.

Renders GameState snapshots (plus live particles) to images by:
1. Drawing the board, items and snake with Pillow
2. Compositing translucent particles on top
3. Encoding a frame sequence to video with MoviePy/FFmpeg

The renderer only reads snapshots; it never touches the session.
"""

import os
import logging
import tempfile
from typing import List, Optional, Sequence, Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageFont
from moviepy import ImageSequenceClip

from domain.game_state import GameState, ITEM_GLYPHS
from domain.items import DEFAULT_ITEM_TYPES
from services.particles import ParticleSystem, hex_to_rgb

logger = logging.getLogger(__name__)

# Video settings
DEFAULT_FPS = 30
DEFAULT_CANVAS_PX = 680
SCORE_BAR_PX = 64
CELL_PADDING = 0.12  # fraction of a cell left empty around each segment


class ColorScheme:
    """Soft pastel colors for the board"""

    BACKGROUND = "#fdf6fb"
    BOARD = "#fefcff"
    GRID_LINE = "#f5e8f0"
    SCORE_BAR = "#ffe6f0"
    SCORE_TEXT = "#6b4c5b"
    OVERLAY_TEXT = "#4a3340"
    ITEM_BACKDROP = "#ffffff"

    # (light, dark) pairs from head to tail
    BODY_PAIRS = [
        ("#ffd6e0", "#ff8fab"),
        ("#fff1c9", "#ffd67a"),
        ("#cffff8", "#9be7ff"),
        ("#e9ffd6", "#c7ffb5"),
    ]


ITEM_COLORS = {item_type.id: item_type.palette[0] for item_type in DEFAULT_ITEM_TYPES}


def mix_colors(a: str, b: str, t: float = 0.5) -> Tuple[int, int, int]:
    """Linear blend of two hex colors"""
    ra, ga, ba = hex_to_rgb(a)
    rb, gb, bb = hex_to_rgb(b)
    return (
        int(ra + (rb - ra) * t),
        int(ga + (gb - ga) * t),
        int(ba + (bb - ba) * t),
    )


class SnakeFrameRenderer:
    """Render GameState snapshots to RGB images"""

    def __init__(self, canvas_px: int = DEFAULT_CANVAS_PX, fps: int = DEFAULT_FPS):
        self.canvas_px = canvas_px
        self.fps = fps
        self.width = canvas_px
        self.height = canvas_px + SCORE_BAR_PX

        try:
            self.font_large = ImageFont.truetype("DejaVuSans-Bold.ttf", 36)
            self.font_small = ImageFont.truetype("DejaVuSans.ttf", 22)
        except OSError:
            self.font_large = ImageFont.load_default()
            self.font_small = ImageFont.load_default()

    def cell_size(self, grid_size: int) -> float:
        return self.canvas_px / grid_size

    def render_frame(
        self,
        state: GameState,
        particles: Optional[ParticleSystem] = None,
    ) -> Image.Image:
        """Render a single frame of the game"""
        img = Image.new('RGB', (self.width, self.height), hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(img)

        self._draw_score_bar(draw, state)

        cell = self.cell_size(state.grid_size)
        self._draw_board(draw, state.grid_size, cell)

        for position, type_id, is_lethal in state.items:
            self._draw_item(draw, position, type_id, is_lethal, cell)

        self._draw_snake(draw, state.snake_positions, cell)

        if particles is not None and len(particles):
            img = self._composite_particles(img, particles)
            draw = ImageDraw.Draw(img)

        self._draw_overlay(draw, state)
        return img

    def _draw_score_bar(self, draw: ImageDraw.ImageDraw, state: GameState):
        draw.rectangle([0, 0, self.width, SCORE_BAR_PX], fill=hex_to_rgb(ColorScheme.SCORE_BAR))
        text = f"Score {state.score}   Best {state.best_score}   Speed {state.speed:g}"
        draw.text((20, SCORE_BAR_PX // 2 - 12), text,
                  fill=hex_to_rgb(ColorScheme.SCORE_TEXT), font=self.font_small)

    def _draw_board(self, draw: ImageDraw.ImageDraw, grid_size: int, cell: float):
        top = SCORE_BAR_PX
        draw.rounded_rectangle(
            [6, top + 6, self.canvas_px - 6, top + self.canvas_px - 6],
            radius=18,
            fill=hex_to_rgb(ColorScheme.BOARD),
        )
        for i in range(1, grid_size):
            offset = int(i * cell)
            draw.line([offset, top, offset, top + self.canvas_px],
                      fill=hex_to_rgb(ColorScheme.GRID_LINE), width=1)
            draw.line([0, top + offset, self.canvas_px, top + offset],
                      fill=hex_to_rgb(ColorScheme.GRID_LINE), width=1)

    def _cell_box(self, position: Tuple[int, int], cell: float, padding: float) -> List[float]:
        x, y = position
        pad = cell * padding
        left = x * cell + pad
        top = SCORE_BAR_PX + y * cell + pad
        return [left, top, left + cell - 2 * pad, top + cell - 2 * pad]

    def _draw_item(self, draw, position, type_id: str, is_lethal: bool, cell: float):
        box = self._cell_box(position, cell, CELL_PADDING)
        size = box[2] - box[0]
        draw.rounded_rectangle(box, radius=size * 0.28, fill=hex_to_rgb(ColorScheme.ITEM_BACKDROP))

        color = ITEM_COLORS.get(type_id, "#ff8fab")
        inner = [box[0] + size * 0.15, box[1] + size * 0.15, box[2] - size * 0.15, box[3] - size * 0.15]
        draw.ellipse(inner, fill=hex_to_rgb(color))

        glyph = 'X' if is_lethal else ITEM_GLYPHS.get(type_id, '?')
        bbox = draw.textbbox((0, 0), glyph, font=self.font_small)
        gw, gh = bbox[2] - bbox[0], bbox[3] - bbox[1]
        draw.text(((box[0] + box[2] - gw) / 2, (box[1] + box[3] - gh) / 2 - bbox[1]),
                  glyph, fill=(255, 255, 255), font=self.font_small)

    def _draw_snake(self, draw, positions: Sequence[Tuple[int, int]], cell: float):
        count = len(positions)
        # Tail first so the head ends up on top
        for idx in range(count - 1, -1, -1):
            t = idx / max(1, count - 1)
            pair = ColorScheme.BODY_PAIRS[int(t * (len(ColorScheme.BODY_PAIRS) - 0.001))]
            box = self._cell_box(positions[idx], cell, CELL_PADDING)
            size = box[2] - box[0]
            draw.rounded_rectangle(box, radius=size * 0.38, fill=mix_colors(pair[0], pair[1]))

            # little glossy highlight
            draw.rounded_rectangle(
                [box[0] + size * 0.08, box[1] + size * 0.06,
                 box[0] + size * 0.44, box[1] + size * 0.28],
                radius=size * 0.12,
                fill=mix_colors(pair[0], "#ffffff", 0.6),
            )

            if idx == 0:
                eye = max(2, size / 6)
                eye_y = box[1] + size / 3
                for eye_x in (box[0] + size / 4, box[2] - size / 4 - eye):
                    draw.ellipse([eye_x, eye_y, eye_x + eye, eye_y + eye], fill=(60, 40, 50))

    def _composite_particles(self, img: Image.Image, particles: ParticleSystem) -> Image.Image:
        layer = Image.new('RGBA', img.size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(layer)
        alphas = particles.alphas()
        for (x, y, _vx, _vy, _life, size), color, alpha in zip(particles.state, particles.colors, alphas):
            y += SCORE_BAR_PX
            draw.ellipse(
                [x - size, y - size * 0.8, x + size, y + size * 0.8],
                fill=(int(color[0]), int(color[1]), int(color[2]), int(alpha * 255)),
            )
        return Image.alpha_composite(img.convert('RGBA'), layer).convert('RGB')

    def _draw_overlay(self, draw: ImageDraw.ImageDraw, state: GameState):
        if state.over:
            lines = ["You won!" if state.result == "won" else "Game over", f"Final score {state.score}"]
        elif state.paused:
            lines = ["Paused"]
        elif not state.running:
            lines = ["Press an arrow key to start"]
        else:
            return

        y = SCORE_BAR_PX + self.canvas_px // 2 - 30 * len(lines)
        for i, line in enumerate(lines):
            font = self.font_large if i == 0 else self.font_small
            bbox = draw.textbbox((0, 0), line, font=font)
            text_width = bbox[2] - bbox[0]
            draw.text((self.width // 2 - text_width // 2, y), line,
                      fill=hex_to_rgb(ColorScheme.OVERLAY_TEXT), font=font)
            y += bbox[3] - bbox[1] + 20

    def write_video(self, frames: Sequence[Image.Image], output_path: Optional[str] = None) -> str:
        """
        Encode frames to an MP4 file

        Args:
            frames: rendered frames, all the same size
            output_path: Optional output path (if None, uses temp file)

        Returns:
            Path to the generated video file
        """
        if not frames:
            raise ValueError("No frames to encode")

        if output_path is None:
            output_path = os.path.join(tempfile.gettempdir(), "fluffy_snake_replay.mp4")

        parent = os.path.dirname(output_path)
        if parent:
            os.makedirs(parent, exist_ok=True)

        logger.info(f"Encoding {len(frames)} frames at {self.fps} fps to {output_path}")
        clip = ImageSequenceClip([np.array(frame) for frame in frames], fps=self.fps)
        clip.write_videofile(output_path, codec='libx264', audio=False, logger=None)

        logger.info(f"Video created successfully at {output_path}")
        return output_path
