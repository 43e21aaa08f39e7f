"""
Image asset loading.

Decoding runs in a worker thread and is awaited once per image before the
layer that needs its pixel dimensions.
"""

import asyncio
import io
import logging
from pathlib import Path
from typing import Optional

from PIL import Image

from .exceptions import AssetUnavailableError
from .models import PortraitSource

logger = logging.getLogger(__name__)


def _decode(source: PortraitSource) -> Image.Image:
    if isinstance(source, Image.Image):
        return source

    if isinstance(source, bytes):
        image = Image.open(io.BytesIO(source))
    else:
        image = Image.open(Path(source))

    image.load()
    return image


async def load_image(source: PortraitSource, asset: str = "image") -> Image.Image:
    """
    Wait until an image is decoded.

    Already-decoded PIL images are returned as-is and never modified.

    Args:
        source: PIL image, encoded bytes, or file path
        asset: Asset name used in error messages

    Returns:
        Decoded PIL image

    Raises:
        AssetUnavailableError: If the source cannot be read or decoded
    """
    try:
        return await asyncio.to_thread(_decode, source)
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise AssetUnavailableError(asset, str(e)) from e


async def load_logo(source: Optional[PortraitSource]) -> Optional[Image.Image]:
    """
    Load the optional event logo.

    Returns None when no logo is configured or it fails to load; the poster
    is then rendered without the logo layer.
    """
    if source is None:
        return None

    try:
        return await load_image(source, asset="logo")
    except AssetUnavailableError as e:
        logger.warning(f"{e}, continuing without it")
        return None
