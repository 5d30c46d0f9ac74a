"""
Image loading for album pages.

Photos are decoded one at a time while a page is drawn. A photo that cannot
be read or decoded is replaced by a transparent 1x1 placeholder so a single
bad file never aborts an album.
"""

import base64
import io
import logging
from pathlib import Path
from typing import Union

from PIL import Image, ImageOps

from photo_album.album.errors import ImageLoadError

logger = logging.getLogger(__name__)

# 1x1 fully transparent RGBA PNG
PLACEHOLDER_PNG = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)


def read_image(path: Union[str, Path]) -> Image.Image:
    """
    Read and decode an image file.

    EXIF orientation is applied so the photo is drawn upright.

    Args:
        path: Image file path

    Returns:
        Decoded PIL image

    Raises:
        ImageLoadError: If the file cannot be read or decoded
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise ImageLoadError(str(path), str(e)) from e

    try:
        img = Image.open(io.BytesIO(data))
        img.load()
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise ImageLoadError(str(path), str(e)) from e

    return ImageOps.exif_transpose(img)


def placeholder_image() -> Image.Image:
    """Fresh copy of the transparent placeholder."""
    img = Image.open(io.BytesIO(PLACEHOLDER_PNG))
    img.load()
    return img


def load_image_or_placeholder(path: Union[str, Path]) -> Image.Image:
    """Read an image, falling back to the placeholder on any load failure."""
    try:
        return read_image(path)
    except ImageLoadError as e:
        logger.warning(f"{e}; using placeholder")
        return placeholder_image()


def encode_for_page(
    img: Image.Image,
    width_pt: float,
    height_pt: float,
    dpi: int = 200,
    quality: int = 85
) -> io.BytesIO:
    """
    Downscale an image to the printed size and compress it.

    Opaque images become JPEG so the PDF embeds them with DCTDecode;
    images with transparency become PNG to keep their alpha channel.

    Args:
        img: Decoded image
        width_pt: Printed width in PDF points
        height_pt: Printed height in PDF points
        dpi: Target resolution of the printed image
        quality: JPEG quality

    Returns:
        Encoded image, rewound
    """
    max_size = (
        max(1, round(width_pt / 72 * dpi)),
        max(1, round(height_pt / 72 * dpi)),
    )
    img.thumbnail(max_size, Image.LANCZOS)

    buffer = io.BytesIO()
    if img.mode in ('RGBA', 'LA') or 'transparency' in img.info:
        img.convert('RGBA').save(buffer, format='PNG', optimize=True)
    else:
        img.convert('RGB').save(buffer, format='JPEG', quality=quality)
    buffer.seek(0)
    return buffer
