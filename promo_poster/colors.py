"""
Color value type and derivations used by the themes and the layer renderer.

Colors carry RGB plus a separate alpha channel so glow gradients can be built
from a single accent color without any string round-tripping.
"""

import math
import re
from dataclasses import dataclass, replace
from typing import Tuple

from .exceptions import ColorParseError

HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def _clamp(value: int) -> int:
    return max(0, min(255, value))


@dataclass(frozen=True)
class Color:
    """RGBA color with 0-255 channels."""
    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def from_hex(cls, spec: str, alpha: int = 255) -> "Color":
        """
        Parse a hex color.

        Examples:
            >>> Color.from_hex("#D4AF37")
            Color(r=212, g=175, b=55, a=255)
            >>> Color.from_hex("fff", alpha=128)
            Color(r=255, g=255, b=255, a=128)
        """
        match = HEX_PATTERN.match(spec.strip())
        if not match:
            raise ColorParseError(spec)

        value = match.group(1)
        if len(value) == 3:
            value = ''.join(c * 2 for c in value)
        if len(value) == 8:
            alpha = int(value[6:8], 16)

        return cls(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16), alpha)

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def rgba(self) -> Tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def to_hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def lighten(self, percent: float) -> "Color":
        return lighten(self, percent)

    def with_alpha(self, alpha: int) -> "Color":
        return with_alpha(self, alpha)


def lighten(color: Color, percent: float) -> Color:
    """
    Lighten a color by a percentage of the channel range.

    Each RGB channel gains round(2.55 * percent), rounded half up, and is
    clamped to 0-255. Alpha is left untouched.

    Args:
        color: Base color
        percent: Amount in percent; values outside 0-100 just clamp harder

    Returns:
        New lightened color
    """
    amount = math.floor(2.55 * percent + 0.5)
    return replace(
        color,
        r=_clamp(color.r + amount),
        g=_clamp(color.g + amount),
        b=_clamp(color.b + amount),
    )


def with_alpha(color: Color, alpha: int) -> Color:
    """Return a copy of the color with its alpha replaced."""
    return replace(color, a=_clamp(int(alpha)))


def interpolate(start: Color, end: Color, ratio: float) -> Color:
    """Linear blend between two colors, alpha included."""
    ratio = max(0.0, min(1.0, ratio))
    return Color(
        int(start.r + (end.r - start.r) * ratio),
        int(start.g + (end.g - start.g) * ratio),
        int(start.b + (end.b - start.b) * ratio),
        int(start.a + (end.a - start.a) * ratio),
    )


WHITE = Color(255, 255, 255)
NEAR_WHITE = Color(248, 246, 240)
SHADOW = Color(0, 0, 0, 110)
