"""
Poster templates (themes) for the vendor promotion poster.

Each template is an immutable bundle of colors applied uniformly to every
layer of one poster:
- Classic (burgundy & gold)
- Royal (navy & gold)
- Emerald (forest green & gold)
- Monochrome (solid charcoal, no texture)
- Ivory (light cream, for print-friendly posters)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional, Tuple

from .colors import Color
from .exceptions import UnknownTemplateError
from .models import TemplateOption

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_ID = "classic"


class BackgroundKind(Enum):
    """How the background colors are applied."""
    SOLID = "solid"
    GRADIENT = "gradient"      # Top-left to bottom-right, evenly spaced stops


@dataclass(frozen=True)
class Background:
    """Background fill specification."""
    kind: BackgroundKind
    colors: Tuple[Color, ...]

    def __post_init__(self):
        if self.kind == BackgroundKind.SOLID and len(self.colors) != 1:
            raise ValueError(f"Solid background needs exactly 1 color, got {len(self.colors)}")
        if self.kind == BackgroundKind.GRADIENT and len(self.colors) < 2:
            raise ValueError(f"Gradient background needs at least 2 colors, got {len(self.colors)}")


@dataclass(frozen=True)
class Theme:
    """A complete poster palette."""
    id: str
    display_name: str
    background: Background
    primary_text: Color
    secondary_text: Color
    accent: Color
    border: Color
    border_accent: Color
    badge_background: Color
    badge_border: Color
    image_glow: Color
    textured: bool = True       # Scatter accent dots over the background
    light: bool = False         # Light backgrounds get a softer backing disc


def _hex(spec: str) -> Color:
    return Color.from_hex(spec)


def _gradient(*specs: str) -> Background:
    return Background(BackgroundKind.GRADIENT, tuple(_hex(s) for s in specs))


def _solid(spec: str) -> Background:
    return Background(BackgroundKind.SOLID, (_hex(spec),))


_THEMES = (
    Theme(
        id="classic",
        display_name="Classic Burgundy",
        background=_gradient("#6B2C1F", "#5A2419", "#4A1810"),
        primary_text=_hex("#FFFFFF"),
        secondary_text=_hex("#E8D9B5"),
        accent=_hex("#C8A961"),
        border=_hex("#C8A961"),
        border_accent=_hex("#E5C97A"),
        badge_background=_hex("#4A1810"),
        badge_border=_hex("#C8A961"),
        image_glow=_hex("#C8A961"),
    ),
    Theme(
        id="royal",
        display_name="Royal Navy",
        background=_gradient("#1B2A4A", "#14203A", "#0B1326"),
        primary_text=_hex("#FFFFFF"),
        secondary_text=_hex("#C9D3E6"),
        accent=_hex("#D4AF37"),
        border=_hex("#D4AF37"),
        border_accent=_hex("#F1D27A"),
        badge_background=_hex("#0B1326"),
        badge_border=_hex("#D4AF37"),
        image_glow=_hex("#D4AF37"),
    ),
    Theme(
        id="emerald",
        display_name="Emerald Garden",
        background=_gradient("#1E4D3A", "#163D2D", "#0E2A1F"),
        primary_text=_hex("#FFFFFF"),
        secondary_text=_hex("#CFE6D8"),
        accent=_hex("#E0B84C"),
        border=_hex("#E0B84C"),
        border_accent=_hex("#F4D57E"),
        badge_background=_hex("#0E2A1F"),
        badge_border=_hex("#E0B84C"),
        image_glow=_hex("#7FD1A8"),
    ),
    Theme(
        id="monochrome",
        display_name="Monochrome",
        background=_solid("#1C1C1C"),
        primary_text=_hex("#FFFFFF"),
        secondary_text=_hex("#BDBDBD"),
        accent=_hex("#E0E0E0"),
        border=_hex("#9E9E9E"),
        border_accent=_hex("#FFFFFF"),
        badge_background=_hex("#2B2B2B"),
        badge_border=_hex("#E0E0E0"),
        image_glow=_hex("#FFFFFF"),
        textured=False,
    ),
    Theme(
        id="ivory",
        display_name="Ivory Elegance",
        background=_gradient("#FBF6EA", "#F1E6CC"),
        primary_text=_hex("#3B2A1A"),
        secondary_text=_hex("#6D5843"),
        accent=_hex("#9C6B1F"),
        border=_hex("#B8955A"),
        border_accent=_hex("#8A5A14"),
        badge_background=_hex("#F6EBD2"),
        badge_border=_hex("#9C6B1F"),
        image_glow=_hex("#C89B4E"),
        light=True,
    ),
)


class ThemeRegistry:
    """
    Read-only lookup of themes by id.

    Themes are seeded once at construction; lookups of unknown ids through
    resolve() fall back to the default theme instead of failing.
    """

    def __init__(self, themes=_THEMES, default_id: str = DEFAULT_TEMPLATE_ID):
        self._themes: Mapping[str, Theme] = MappingProxyType({t.id: t for t in themes})
        if default_id not in self._themes:
            raise UnknownTemplateError(default_id)
        self.default_id = default_id

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._themes

    def __len__(self) -> int:
        return len(self._themes)

    def __iter__(self) -> Iterator[Theme]:
        return iter(self._themes.values())

    def get(self, template_id: str) -> Theme:
        """Strict lookup. Raises UnknownTemplateError for unknown ids."""
        try:
            return self._themes[template_id]
        except KeyError:
            raise UnknownTemplateError(template_id) from None

    def resolve(self, template_id: Optional[str] = None) -> Theme:
        """
        Resolve a template id, falling back to the default.

        Args:
            template_id: Requested id; None or empty selects the default

        Returns:
            The matching Theme, or the default Theme
        """
        if not template_id:
            return self._themes[self.default_id]

        try:
            return self.get(template_id)
        except UnknownTemplateError as e:
            logger.warning(f"{e}, using '{self.default_id}'")
            return self._themes[self.default_id]

    def list(self) -> List[TemplateOption]:
        """List templates in registration order."""
        return [TemplateOption(id=t.id, display_name=t.display_name) for t in self]


registry = ThemeRegistry()


def get_template_options() -> list:
    """Get list of available templates for user selection."""
    return [
        {
            "id": theme.id,
            "name": theme.display_name,
            "background": theme.background.kind.value,
            "accent": theme.accent.to_hex(),
        }
        for theme in registry
    ]
