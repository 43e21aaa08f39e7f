"""
Input and option models for poster generation.
"""

from pathlib import Path
from typing import List, Union

from PIL import Image
from pydantic import BaseModel, ConfigDict

PortraitSource = Union[Image.Image, bytes, str, Path]


class PosterInput(BaseModel):
    """Caller-supplied data for one poster."""
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, arbitrary_types_allowed=True)

    name: str                     # Person's name, e.g. "Ada Obi"
    role: str                     # e.g. "CEO", "Sales Manager"
    entity_type: str              # e.g. "Business", "Company", "Employer"
    business: str                 # Business or brand name
    portrait: PortraitSource      # Pre-cropped image, raw bytes, or a file path

    def missing_fields(self) -> List[str]:
        """Names of the required text fields that are empty."""
        return [
            field for field in ("name", "role", "entity_type", "business")
            if not getattr(self, field)
        ]


class TemplateOption(BaseModel):
    """A selectable template."""
    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str
