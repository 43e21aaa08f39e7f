"""
Exceptions raised by the poster compositor.

Fatal errors (missing fields, bad portrait dimensions) abort a generation
before anything is drawn. Asset and template errors are absorbed by the
compositor and only logged.
"""

from typing import Iterable, Optional


class PosterError(Exception):
    """Base class for all poster generation errors."""


class MissingFieldError(PosterError):
    """
    Raised when required text fields are empty after trimming.

    Attributes:
        fields: Names of the empty fields, in declaration order
    """

    def __init__(self, fields: Iterable[str]):
        self.fields = list(fields)
        super().__init__(f"Missing required field(s): {', '.join(self.fields)}")


class InvalidImageDimensionsError(PosterError):
    """Raised when the portrait has zero width or height."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        super().__init__(f"Invalid image dimensions {width}x{height}")


class AssetUnavailableError(PosterError):
    """
    Raised when an image asset cannot be loaded or decoded.

    Attributes:
        asset: Which asset failed ("portrait", "logo")
        reason: Underlying error description
    """

    def __init__(self, asset: str, reason: Optional[str] = None):
        self.asset = asset
        self.reason = reason

        message = f"Asset '{asset}' unavailable"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class UnknownTemplateError(PosterError, KeyError):
    """Raised by strict template lookups for ids not in the registry."""

    def __init__(self, template_id: Optional[str]):
        self.template_id = template_id
        super().__init__(f"Unknown template '{template_id}'")

    def __str__(self) -> str:
        return self.args[0]


class ColorParseError(PosterError, ValueError):
    """Raised when a color specification cannot be parsed."""

    def __init__(self, color_spec: str, expected_format: str = "#RRGGBB, #RGB or #RRGGBBAA"):
        self.color_spec = color_spec
        self.expected_format = expected_format
        super().__init__(f"Color '{color_spec}' not recognized (expected format: {expected_format})")
