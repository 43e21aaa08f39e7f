"""
Settings for the poster compositor.

Values are read from the environment (prefix POSTER_) or a .env file, e.g.
POSTER_DEFAULT_TEMPLATE=royal or POSTER_LOGO_PATH=assets/logo.png.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class PosterSettings(BaseSettings):
    default_template: str = "classic"
    logo_path: Optional[str] = None
    texture_dots: int = 50

    # Font overrides; system fonts are tried when unset
    font_regular: Optional[str] = None
    font_bold: Optional[str] = None
    font_italic: Optional[str] = None

    # Event copy printed on every poster
    event_title: str = "St Anne's Trade & Job Fair"
    edition_label: str = "2ND EDITION"
    edition_caption: str = "Patronize us at..."
    date_primary: str = "NOV 30"
    date_secondary: str = "2025"
    venue: str = "St Anne Parish Hall & Ground, Itire"

    model_config = SettingsConfigDict(env_prefix="POSTER_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> PosterSettings:
    return PosterSettings()
