"""
Background painting for posters.

Supports two fills:
- Solid: single theme color
- Gradient: diagonal (top-left to bottom-right) blend over evenly spaced stops

Textured themes additionally get a sprinkle of small accent dots. The dot
positions come from the process RNG and differ on every render.
"""

import logging
import random
from typing import Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from .colors import Color, interpolate
from .templates import Background, BackgroundKind

logger = logging.getLogger(__name__)

DOT_SIZE = 2
DOT_ALPHA = 40


def color_at(stops: Sequence[Color], ratio: float) -> Color:
    """Color at ratio (0-1) along evenly spaced gradient stops."""
    if len(stops) == 1:
        return stops[0]

    ratio = max(0.0, min(1.0, ratio))
    scaled = ratio * (len(stops) - 1)
    index = min(int(scaled), len(stops) - 2)
    return interpolate(stops[index], stops[index + 1], scaled - index)


def diagonal_gradient(size: Tuple[int, int], stops: Sequence[Color]) -> Image.Image:
    """
    Create an RGBA image filled with a top-left to bottom-right gradient.

    Each anti-diagonal (x + y constant) gets one color, so the image is drawn
    with width + height - 1 lines instead of per-pixel writes.
    """
    width, height = size
    image = Image.new('RGBA', size)
    draw = ImageDraw.Draw(image)

    steps = max(width + height - 2, 1)
    for d in range(width + height - 1):
        fill = color_at(stops, d / steps).rgba
        draw.line([(d, 0), (d - height + 1, height - 1)], fill=fill)

    return image


def create_background(size: Tuple[int, int], background: Background) -> Image.Image:
    """
    Create the background image for a theme.

    Args:
        size: Canvas (width, height)
        background: Theme background specification

    Returns:
        Opaque RGBA background
    """
    if background.kind == BackgroundKind.GRADIENT:
        return diagonal_gradient(size, background.colors)

    return Image.new('RGBA', size, background.colors[0].rgba)


def draw_texture(
    canvas: Image.Image,
    color: Color,
    count: int,
    rng: Optional[random.Random] = None,
) -> None:
    """
    Scatter small translucent dots over the canvas.

    Args:
        canvas: RGBA canvas, modified in place
        color: Dot color (alpha is replaced)
        count: Number of dots
        rng: Random source; defaults to the module-level RNG
    """
    rng = rng or random
    width, height = canvas.size

    layer = Image.new('RGBA', canvas.size, (0, 0, 0, 0))
    draw = ImageDraw.Draw(layer)
    fill = color.with_alpha(DOT_ALPHA).rgba

    for _ in range(count):
        x = rng.randint(0, width - DOT_SIZE)
        y = rng.randint(0, height - DOT_SIZE)
        draw.rectangle([(x, y), (x + DOT_SIZE - 1, y + DOT_SIZE - 1)], fill=fill)

    canvas.alpha_composite(layer)
    logger.debug(f"Texture: {count} dots")
