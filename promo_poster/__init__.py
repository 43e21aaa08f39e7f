# Vendor Promotion Poster Module
# Themed 1080x1080 posters: layout math in code, drawing with Pillow

from .generator import PosterCompositor, suggest_filename
from .models import PosterInput, TemplateOption
from .templates import Theme, ThemeRegistry, get_template_options
from .colors import Color, lighten, with_alpha
from .layout import LayoutGeometry, fit_cover, wrap_text
from .renderer import PosterRenderer
from .exceptions import (
    PosterError,
    MissingFieldError,
    InvalidImageDimensionsError,
    AssetUnavailableError,
    UnknownTemplateError,
)

__all__ = [
    "PosterCompositor",
    "suggest_filename",
    "PosterInput",
    "TemplateOption",
    "Theme",
    "ThemeRegistry",
    "get_template_options",
    "Color",
    "lighten",
    "with_alpha",
    "LayoutGeometry",
    "fit_cover",
    "wrap_text",
    "PosterRenderer",
    "PosterError",
    "MissingFieldError",
    "InvalidImageDimensionsError",
    "AssetUnavailableError",
    "UnknownTemplateError",
]
