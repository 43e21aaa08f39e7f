"""
PosterCompositor - Main orchestrator for poster generation.

Combines:
- ThemeRegistry: template lookup with default fallback
- assets: one-shot decoding of the portrait and event logo
- layout: portrait cover-fit and fixed frame geometry
- PosterRenderer: the ordered paint steps

This is the main entry point for the poster feature.
"""

import asyncio
import logging
import re
from pathlib import Path
from typing import List, Optional, Union

from PIL import Image

from .assets import load_image, load_logo
from .config import PosterSettings, get_settings
from .exceptions import MissingFieldError
from .layout import fit_cover
from .models import PortraitSource, PosterInput, TemplateOption
from .renderer import PosterRenderer
from .templates import ThemeRegistry, registry as default_registry

logger = logging.getLogger(__name__)


class PosterCompositor:
    """
    Main orchestrator for poster generation.

    Workflow:
    1. Check required fields (nothing is drawn if any are empty)
    2. Wait for the portrait and logo to decode
    3. Cover-fit the portrait (rejects zero-size images)
    4. Resolve the template
    5. Paint background, border, logo, header, date, medallion,
       identity text and footer, in that order
    """

    def __init__(
        self,
        settings: Optional[PosterSettings] = None,
        logo: Optional[PortraitSource] = None,
        registry: Optional[ThemeRegistry] = None,
    ):
        """
        Initialize compositor.

        Args:
            settings: Poster settings. If None, read from the environment.
            logo: Event logo (image, bytes or path). Defaults to settings.logo_path.
            registry: Template registry. Defaults to the built-in templates.
        """
        self.settings = settings or get_settings()
        self.registry = registry or default_registry
        self.renderer = PosterRenderer(self.settings)
        self.logo_source = logo if logo is not None else self.settings.logo_path
        self.template_id = self.registry.resolve(self.settings.default_template).id
        self._lock = asyncio.Lock()

    def set_template(self, template_id: Optional[str]) -> str:
        """
        Choose the template used when generate() gets no template id.

        Unknown ids fall back to the registry default.

        Returns:
            The id that will actually be used
        """
        self.template_id = self.registry.resolve(template_id).id
        return self.template_id

    def get_available_templates(self) -> List[TemplateOption]:
        """Templates in registration order."""
        return self.registry.list()

    async def generate(self, data: PosterInput, template_id: Optional[str] = None) -> Image.Image:
        """
        Generate a poster.

        Args:
            data: Text fields and portrait
            template_id: Template to use; falls back to the selected template

        Returns:
            New 1080x1080 RGBA poster

        Raises:
            MissingFieldError: If a required text field is empty
            AssetUnavailableError: If the portrait cannot be decoded
            InvalidImageDimensionsError: If the portrait has zero width or height
        """
        missing = data.missing_fields()
        if missing:
            raise MissingFieldError(missing)

        async with self._lock:
            portrait, logo = await asyncio.gather(
                load_image(data.portrait, asset="portrait"),
                load_logo(self.logo_source),
            )

            fit = fit_cover(portrait.width, portrait.height, self.renderer.geometry.photo_size)
            theme = self.registry.resolve(template_id or self.template_id)

            logger.info(f"Generating poster for '{data.business}' with template '{theme.id}'")

            r = self.renderer
            canvas = r.create_canvas()
            r.draw_background(canvas, theme)
            r.draw_texture(canvas, theme)
            r.draw_border(canvas, theme)
            if logo is not None:
                r.draw_logo(canvas, logo)
            r.draw_header(canvas, theme)
            r.draw_date(canvas, theme)
            r.draw_medallion(canvas, theme, portrait, fit)
            r.draw_identity(canvas, theme, data)
            r.draw_footer(canvas, theme)

            logger.info("Poster generation complete!")
            return canvas

    def export(
        self,
        poster: Image.Image,
        output_path: Optional[Union[str, Path]] = None,
    ) -> Union[bytes, str]:
        """
        Export poster to a PNG file or bytes.

        Args:
            poster: Generated poster
            output_path: Optional file path

        Returns:
            File path or image bytes
        """
        return self.renderer.export(poster, output_path)


def suggest_filename(business: str) -> str:
    """
    Download filename for a poster.

    Examples:
        >>> suggest_filename("Ada's Bakery & Co")
        'ada_s_bakery___co_promotion.png'
    """
    slug = re.sub(r"[^a-z0-9]", "_", business.strip(), flags=re.IGNORECASE).lower()
    return f"{slug}_promotion.png"
