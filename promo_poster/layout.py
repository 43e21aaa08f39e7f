"""
Layout math for the vendor promotion poster.

Handles:
1. Fixed geometry of the 1080x1080 frame
2. Cover-fitting the portrait into the circular medallion
3. Greedy word wrapping by character count
"""

from dataclasses import dataclass
from typing import List

from .exceptions import InvalidImageDimensionsError

CANVAS_SIZE = 1080


@dataclass(frozen=True)
class LayoutGeometry:
    """Positions and sizes on the poster frame. Origin is top-left."""
    width: int = CANVAS_SIZE
    height: int = CANVAS_SIZE

    # Frame
    border_inset: int = 30
    border_width: int = 3
    corner_inset: int = 18
    corner_length: int = 70
    corner_width: int = 7

    # Logo box (top-left)
    logo_x: int = 60
    logo_y: int = 55
    logo_size: int = 110

    # Header
    title_y: int = 70               # Top of the event title
    badge_y: int = 128              # Top of the edition badge
    badge_padding_x: int = 28
    badge_padding_y: int = 10
    badge_line_gap: int = 6

    # Date block (right-aligned)
    date_right: int = 1010
    date_y: int = 62
    date_line_gap: int = 8

    # Medallion
    photo_center_x: int = CANVAS_SIZE // 2
    photo_center_y: int = 500
    photo_radius: int = 190         # Backing disc radius
    photo_inset: int = 6            # Portrait clip is this much smaller than the backing
    ring_width: int = 14
    inner_glow_width: int = 6
    glow_extent: int = 70           # Outer glow reaches this far past the ring

    # Identity text blocks
    text_top: int = 760
    text_left: int = 90
    text_right: int = 990
    text_gutter: int = 24          # Clear space between the two blocks at the center line
    line_gap: int = 10
    business_wrap_chars: int = 16

    # Footer
    footer_y: int = 1000

    @property
    def photo_size(self) -> int:
        """Diameter of the portrait clip region."""
        return 2 * (self.photo_radius - self.photo_inset)

    @property
    def ring_outer_radius(self) -> int:
        return self.photo_radius + self.ring_width

    @property
    def glow_radius(self) -> int:
        return self.ring_outer_radius + self.glow_extent


@dataclass(frozen=True)
class FitResult:
    """Where to draw a scaled image relative to the target square's top-left."""
    draw_width: float
    draw_height: float
    offset_x: float
    offset_y: float


def fit_cover(image_width: int, image_height: int, target_size: float) -> FitResult:
    """
    Scale an image to cover a square without distortion.

    The shorter side matches target_size and the overflow on the longer side
    is centered (negative offset). Clipping the overflow is the caller's job.

    Args:
        image_width: Source width in pixels
        image_height: Source height in pixels
        target_size: Side of the target square

    Returns:
        FitResult with draw size and offsets

    Examples:
        >>> fit_cover(1600, 800, 400)
        FitResult(draw_width=800.0, draw_height=400, offset_x=-200.0, offset_y=0)
    """
    if image_width <= 0 or image_height <= 0:
        raise InvalidImageDimensionsError(image_width, image_height)

    aspect = image_width / image_height

    if aspect > 1:
        # Wider than tall
        draw_height = target_size
        draw_width = target_size * aspect
        return FitResult(draw_width, draw_height, (target_size - draw_width) / 2, 0)

    # Taller or square
    draw_width = target_size
    draw_height = target_size / aspect
    return FitResult(draw_width, draw_height, 0, (target_size - draw_height) / 2)


def wrap_text(text: str, max_chars: int) -> List[str]:
    """
    Wrap text into lines of at most max_chars characters.

    Words are packed greedily. A word longer than max_chars gets a line of
    its own and is never split.

    Examples:
        >>> wrap_text("AAAAAAAAAA BBBBBBBBBB", 10)
        ['AAAAAAAAAA', 'BBBBBBBBBB']
        >>> wrap_text("Short", 10)
        ['Short']
    """
    if len(text) <= max_chars:
        return [text]

    lines = []
    current = ""

    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if len(candidate) <= max_chars or not current:
            current = candidate
        else:
            lines.append(current)
            current = word

    if current:
        lines.append(current)

    return lines or [""]
