"""
PosterRenderer - Pillow-based drawing routines for the promotion poster.

Handles:
1. Background fill and dot texture
2. Frame border with corner accents
3. Event logo with drop shadow
4. Header title and edition badge
5. Date block
6. Vendor medallion (glow, ring, backing disc, portrait, highlight)
7. Identity text blocks
8. Footer venue line
9. Exporting the final image

Every step reads only the theme and the poster data. Drop shadows are
applied per composite call, so a shadow never leaks into later steps.
"""

import io
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from PIL import Image, ImageChops, ImageDraw, ImageFilter, ImageFont

from .background import create_background, diagonal_gradient, draw_texture
from .colors import NEAR_WHITE, SHADOW, WHITE, Color
from .config import PosterSettings, get_settings
from .layout import FitResult, LayoutGeometry, wrap_text
from .models import PosterInput
from .templates import Theme

logger = logging.getLogger(__name__)

FONT_PATHS = {
    "regular": [
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",  # Linux
        "/System/Library/Fonts/Helvetica.ttc",  # macOS
        "C:\\Windows\\Fonts\\arial.ttf",  # Windows
    ],
    "bold": [
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
        "/System/Library/Fonts/Supplemental/Arial Bold.ttf",
        "C:\\Windows\\Fonts\\arialbd.ttf",
    ],
    "italic": [
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Oblique.ttf",
        "/System/Library/Fonts/Supplemental/Arial Italic.ttf",
        "C:\\Windows\\Fonts\\ariali.ttf",
    ],
}

SHADOW_OFFSET = (0, 8)
SHADOW_BLUR = 12
SHADOW_PAD = 24

GLOW_ALPHA = 150
GLOW_STEP = 2
RING_HIGHLIGHT_PERCENT = 30
INNER_GLOW_ALPHA = 120
HIGHLIGHT_ALPHA = 160
HIGHLIGHT_WIDTH = 3

TITLE_SIZE = 36
LABEL_SIZE = 22
CAPTION_SIZE = 18
DATE_SIZE = 34
ENTITY_SIZE = 26
BUSINESS_SIZE = 40
NAME_SIZE = 34
ROLE_SIZE = 26
MIN_TEXT_SIZE = 12
ELLIPSIS = "..."


def _box(x0: float, y0: float, x1: float, y1: float) -> Tuple[float, float, float, float]:
    """Normalize two corners into a (left, top, right, bottom) box."""
    return (min(x0, x1), min(y0, y1), max(x0, x1), max(y0, y1))


def _visible_region(
    image_size: Tuple[int, int],
    fit: FitResult,
    target_size: int,
) -> Tuple[float, float, float, float]:
    """Source-pixel box that lands inside the target square after a cover fit."""
    width, height = image_size
    scale = fit.draw_width / width
    left = -fit.offset_x / scale
    top = -fit.offset_y / scale
    return (
        max(0.0, left),
        max(0.0, top),
        min(float(width), left + target_size / scale),
        min(float(height), top + target_size / scale),
    )


class PosterRenderer:
    """
    Paints the poster layers onto a canvas.

    The renderer holds no per-poster state; the compositor decides the order
    in which the draw_* methods run.
    """

    def __init__(
        self,
        settings: Optional[PosterSettings] = None,
        geometry: Optional[LayoutGeometry] = None,
    ):
        self.settings = settings or get_settings()
        self.geometry = geometry or LayoutGeometry()
        self._fonts: Dict[Tuple[str, int], ImageFont.FreeTypeFont] = {}

    # ------------------------------------------------------------------ fonts

    def _get_font(self, size: int, style: str = "regular") -> ImageFont.FreeTypeFont:
        """Get a font for text rendering, cached per (style, size)."""
        key = (style, size)
        if key in self._fonts:
            return self._fonts[key]

        override = getattr(self.settings, f"font_{style}", None)
        candidates = ([override] if override else []) + FONT_PATHS[style]

        font = None
        for fp in candidates:
            try:
                font = ImageFont.truetype(fp, size)
                break
            except OSError:
                continue

        if font is None:
            logger.warning(f"No {style} system font found, using Pillow default")
            font = ImageFont.load_default(size=size)

        self._fonts[key] = font
        return font

    def _draw_text(
        self,
        draw: ImageDraw.ImageDraw,
        x: float,
        y: float,
        text: str,
        font: ImageFont.FreeTypeFont,
        fill: Color,
        align: str = "left",
    ) -> None:
        """Draw a single line with its top at y, anchored left, center or right at x."""
        width = draw.textlength(text, font=font)
        if align == "center":
            x -= width / 2
        elif align == "right":
            x -= width
        draw.text((x, y), text, font=font, fill=fill.rgba)

    def _fit_font(
        self,
        draw: ImageDraw.ImageDraw,
        lines: List[str],
        size: int,
        style: str,
        max_width: float,
    ) -> Tuple[ImageFont.FreeTypeFont, int]:
        """Largest font, at most `size`, whose widest line fits max_width."""
        while size > MIN_TEXT_SIZE:
            font = self._get_font(size, style)
            if max(draw.textlength(line, font=font) for line in lines) <= max_width:
                return font, size
            size -= 2
        return self._get_font(MIN_TEXT_SIZE, style), MIN_TEXT_SIZE

    def _truncate(self, draw: ImageDraw.ImageDraw, text: str, font: ImageFont.FreeTypeFont, max_width: float) -> str:
        """Cut text with an ellipsis until it fits max_width."""
        if draw.textlength(text, font=font) <= max_width:
            return text
        while text and draw.textlength(text + ELLIPSIS, font=font) > max_width:
            text = text[:-1]
        return text.rstrip() + ELLIPSIS

    # ---------------------------------------------------------------- shadows

    def _composite_with_shadow(
        self,
        canvas: Image.Image,
        layer: Image.Image,
        position: Tuple[int, int],
    ) -> None:
        """Composite a layer and a blurred drop shadow cast by its alpha."""
        shadow = Image.new('RGBA', layer.size, SHADOW.rgb + (0,))
        shadow.putalpha(layer.getchannel('A').point(lambda a: a * SHADOW.a // 255))
        shadow = shadow.filter(ImageFilter.GaussianBlur(SHADOW_BLUR))

        x, y = position
        canvas.alpha_composite(shadow, (x + SHADOW_OFFSET[0], y + SHADOW_OFFSET[1]))
        canvas.alpha_composite(layer, (x, y))

    # ----------------------------------------------------------------- layers

    def create_canvas(self) -> Image.Image:
        return Image.new('RGBA', (self.geometry.width, self.geometry.height), (0, 0, 0, 0))

    def draw_background(self, canvas: Image.Image, theme: Theme) -> None:
        """Fill the canvas with the theme background."""
        canvas.alpha_composite(create_background(canvas.size, theme.background))

    def draw_texture(self, canvas: Image.Image, theme: Theme) -> None:
        """Random accent dots; skipped for untextured themes."""
        if theme.textured:
            draw_texture(canvas, theme.accent, self.settings.texture_dots)

    def draw_border(self, canvas: Image.Image, theme: Theme) -> None:
        """Inset frame plus an L-shaped accent in each corner."""
        g = self.geometry
        w, h = canvas.size
        draw = ImageDraw.Draw(canvas)

        draw.rectangle(
            [(g.border_inset, g.border_inset), (w - 1 - g.border_inset, h - 1 - g.border_inset)],
            outline=theme.border.rgba,
            width=g.border_width,
        )

        fill = theme.border_accent.rgba
        thickness = g.corner_width - 1
        for sx, sy in ((1, 1), (-1, 1), (1, -1), (-1, -1)):
            x0 = g.corner_inset if sx > 0 else w - 1 - g.corner_inset
            y0 = g.corner_inset if sy > 0 else h - 1 - g.corner_inset
            x1 = x0 + sx * g.corner_length
            y1 = y0 + sy * g.corner_length

            draw.rectangle(_box(x0, y0, x1, y0 + sy * thickness), fill=fill)
            draw.rectangle(_box(x0, y0, x0 + sx * thickness, y1), fill=fill)

    def draw_logo(self, canvas: Image.Image, logo: Image.Image) -> None:
        """Event logo fitted into the top-left box, with a soft shadow."""
        g = self.geometry
        fitted = logo.convert('RGBA')
        fitted.thumbnail((g.logo_size, g.logo_size), Image.Resampling.LANCZOS)

        layer = Image.new('RGBA', (g.logo_size + 2 * SHADOW_PAD,) * 2, (0, 0, 0, 0))
        layer.paste(
            fitted,
            (SHADOW_PAD + (g.logo_size - fitted.width) // 2, SHADOW_PAD + (g.logo_size - fitted.height) // 2),
        )

        self._composite_with_shadow(canvas, layer, (g.logo_x - SHADOW_PAD, g.logo_y - SHADOW_PAD))

    def draw_header(self, canvas: Image.Image, theme: Theme) -> None:
        """Centered event title followed by the edition badge."""
        g = self.geometry
        s = self.settings
        draw = ImageDraw.Draw(canvas)
        center_x = canvas.width / 2

        self._draw_text(draw, center_x, g.title_y, s.event_title, self._get_font(TITLE_SIZE, "bold"), theme.accent, "center")

        label_font = self._get_font(LABEL_SIZE, "bold")
        caption_font = self._get_font(CAPTION_SIZE, "italic")
        content_width = max(
            draw.textlength(s.edition_label, font=label_font),
            draw.textlength(s.edition_caption, font=caption_font),
        )
        badge_width = content_width + 2 * g.badge_padding_x
        badge_height = LABEL_SIZE + g.badge_line_gap + CAPTION_SIZE + 2 * g.badge_padding_y

        draw.rectangle(
            [(center_x - badge_width / 2, g.badge_y), (center_x + badge_width / 2, g.badge_y + badge_height)],
            fill=theme.badge_background.rgba,
            outline=theme.badge_border.rgba,
            width=2,
        )

        y = g.badge_y + g.badge_padding_y
        self._draw_text(draw, center_x, y, s.edition_label, label_font, theme.primary_text, "center")
        y += LABEL_SIZE + g.badge_line_gap
        self._draw_text(draw, center_x, y, s.edition_caption, caption_font, theme.secondary_text, "center")

    def draw_date(self, canvas: Image.Image, theme: Theme) -> None:
        """Right-aligned two-line date near the top."""
        g = self.geometry
        draw = ImageDraw.Draw(canvas)

        self._draw_text(
            draw, g.date_right, g.date_y, self.settings.date_primary, self._get_font(DATE_SIZE, "bold"), theme.accent, "right"
        )
        self._draw_text(
            draw,
            g.date_right,
            g.date_y + DATE_SIZE + g.date_line_gap,
            self.settings.date_secondary,
            self._get_font(24),
            theme.secondary_text,
            "right",
        )

    def draw_medallion(self, canvas: Image.Image, theme: Theme, portrait: Image.Image, fit: FitResult) -> None:
        """
        Draw the circular portrait composition with a drop shadow.

        Layers, outermost first: radial glow, gradient ring, inner-glow ring,
        backing disc, clipped portrait, top-half highlight arc.

        Args:
            canvas: Poster canvas
            theme: Active theme
            portrait: Decoded portrait (not modified)
            fit: Cover-fit of the portrait into the photo region
        """
        g = self.geometry
        radius = g.glow_radius
        layer = Image.new('RGBA', (2 * radius, 2 * radius), (0, 0, 0, 0))
        draw = ImageDraw.Draw(layer)
        c = radius

        # Outer glow, fading to transparent at the edge
        ring_outer = g.ring_outer_radius
        span = radius - ring_outer
        for r in range(radius, ring_outer - 1, -GLOW_STEP):
            alpha = int(GLOW_ALPHA * (1 - (r - ring_outer) / span))
            draw.ellipse([(c - r, c - r), (c + r, c + r)], fill=theme.image_glow.with_alpha(alpha).rgba)

        # Gradient ring: accent, lightened at the midpoint, back to accent
        ring = diagonal_gradient(
            (2 * ring_outer, 2 * ring_outer),
            [theme.accent, theme.accent.lighten(RING_HIGHLIGHT_PERCENT), theme.accent],
        )
        ring_mask = Image.new('L', ring.size, 0)
        mask_draw = ImageDraw.Draw(ring_mask)
        mask_draw.ellipse([(0, 0), (2 * ring_outer - 1, 2 * ring_outer - 1)], fill=255)
        inner = ring_outer - g.photo_radius
        mask_draw.ellipse([(inner, inner), (2 * ring_outer - 1 - inner, 2 * ring_outer - 1 - inner)], fill=0)
        ring.putalpha(ring_mask)
        layer.alpha_composite(ring, (c - ring_outer, c - ring_outer))

        # Translucent inner glow over the ring's inner edge
        overlay = Image.new('RGBA', layer.size, (0, 0, 0, 0))
        r = g.photo_radius + g.inner_glow_width
        ImageDraw.Draw(overlay).ellipse(
            [(c - r, c - r), (c + r, c + r)],
            outline=theme.accent.lighten(50).with_alpha(INNER_GLOW_ALPHA).rgba,
            width=g.inner_glow_width,
        )
        layer.alpha_composite(overlay)

        # Backing disc
        draw = ImageDraw.Draw(layer)
        r = g.photo_radius
        backing = NEAR_WHITE if theme.light else WHITE
        draw.ellipse([(c - r, c - r), (c + r, c + r)], fill=backing.rgba)

        # Portrait clipped to a slightly smaller disc
        size = g.photo_size
        photo = portrait.convert('RGBA').resize(
            (size, size),
            Image.Resampling.LANCZOS,
            box=_visible_region(portrait.size, fit, size),
        )

        clip = Image.new('L', (size, size), 0)
        ImageDraw.Draw(clip).ellipse([(0, 0), (size - 1, size - 1)], fill=255)
        photo.putalpha(ImageChops.multiply(photo.getchannel('A'), clip))
        layer.alpha_composite(photo, (c - size // 2, c - size // 2))

        # Sheen across the top half only
        overlay = Image.new('RGBA', layer.size, (0, 0, 0, 0))
        r = size // 2 - 10
        ImageDraw.Draw(overlay).arc(
            [(c - r, c - r), (c + r, c + r)],
            start=180,
            end=360,
            fill=WHITE.with_alpha(HIGHLIGHT_ALPHA).rgba,
            width=HIGHLIGHT_WIDTH,
        )
        layer.alpha_composite(overlay)

        self._composite_with_shadow(canvas, layer, (g.photo_center_x - c, g.photo_center_y - c))

    def draw_identity(self, canvas: Image.Image, theme: Theme, data: PosterInput) -> None:
        """
        Business block on the left, person block on the right.

        Each block stays on its own side of the center line: lines that are
        too wide are drawn smaller, down to MIN_TEXT_SIZE, and cut with an
        ellipsis past that.
        """
        g = self.geometry
        draw = ImageDraw.Draw(canvas)
        center_x = canvas.width / 2
        left_width = center_x - g.text_gutter / 2 - g.text_left
        right_width = g.text_right - center_x - g.text_gutter / 2

        # Left: entity type label, then the business name
        label_font, _ = self._fit_font(draw, [data.entity_type], ENTITY_SIZE, "italic", left_width)
        label = self._truncate(draw, data.entity_type, label_font, left_width)
        self._draw_text(draw, g.text_left, g.text_top, label, label_font, theme.secondary_text)

        lines = wrap_text(data.business.upper(), g.business_wrap_chars)
        business_font, size = self._fit_font(draw, lines, BUSINESS_SIZE, "bold", left_width)
        y = g.text_top + ENTITY_SIZE + g.line_gap
        for line in lines:
            line = self._truncate(draw, line, business_font, left_width)
            self._draw_text(draw, g.text_left, y, line, business_font, theme.accent)
            y += size + g.line_gap

        # Right: name, then role
        role = f"({data.role})"
        name_font, _ = self._fit_font(draw, [data.name], NAME_SIZE, "bold", right_width)
        role_font, _ = self._fit_font(draw, [role], ROLE_SIZE, "regular", right_width)
        self._draw_text(
            draw,
            g.text_right,
            g.text_top,
            self._truncate(draw, data.name, name_font, right_width),
            name_font,
            theme.primary_text,
            "right",
        )
        self._draw_text(
            draw,
            g.text_right,
            g.text_top + NAME_SIZE + g.line_gap,
            self._truncate(draw, role, role_font, right_width),
            role_font,
            theme.secondary_text,
            "right",
        )

    def draw_footer(self, canvas: Image.Image, theme: Theme) -> None:
        """Centered venue line near the bottom edge."""
        draw = ImageDraw.Draw(canvas)
        self._draw_text(
            draw,
            canvas.width / 2,
            self.geometry.footer_y,
            self.settings.venue,
            self._get_font(24),
            theme.secondary_text,
            "center",
        )

    # ----------------------------------------------------------------- export

    def export(
        self,
        image: Image.Image,
        output_path: Optional[Union[str, Path]] = None,
    ) -> Union[bytes, str]:
        """
        Export poster as lossless PNG.

        Args:
            image: Finished poster
            output_path: Optional file path. If None, returns bytes.

        Returns:
            File path if output_path given, else bytes
        """
        if output_path:
            image.save(output_path, format="PNG")
            logger.info(f"Exported poster to {output_path}")
            return str(output_path)

        buffer = io.BytesIO()
        image.save(buffer, format="PNG")
        return buffer.getvalue()
