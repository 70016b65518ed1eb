"""Pillow transcoding of uploaded images to JPEG."""

import io

from PIL import Image, UnidentifiedImageError

from backoffice.core.exceptions import ValidationException

FULL_QUALITY = 85
THUMBNAIL_QUALITY = 80


def _to_rgb(image: Image.Image) -> Image.Image:
    # Flatten transparency onto white; JPEG has no alpha channel
    if image.mode in ("RGBA", "LA", "P"):
        if image.mode == "P":
            image = image.convert("RGBA")
        background = Image.new("RGB", image.size, (255, 255, 255))
        background.paste(image, mask=image.split()[-1])
        return background
    if image.mode != "RGB":
        return image.convert("RGB")
    return image


def _encode(image: Image.Image, max_size: int, quality: int) -> bytes:
    resized = image.copy()
    # thumbnail() keeps aspect ratio and never enlarges
    resized.thumbnail((max_size, max_size), Image.Resampling.LANCZOS)
    buffer = io.BytesIO()
    resized.save(buffer, format="JPEG", quality=quality)
    return buffer.getvalue()


def _open(data: bytes) -> Image.Image:
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (UnidentifiedImageError, OSError) as e:
        raise ValidationException("Invalid image file") from e
    return image


def ensure_image(data: bytes) -> None:
    """Raise ValidationException unless the bytes decode as an image"""
    _open(data)


def transcode(data: bytes, full_size: int, thumbnail_size: int) -> tuple[bytes, bytes]:
    """
    Produce the full-size and thumbnail JPEG renditions of an upload.

    Args:
        data: Raw uploaded bytes (any format Pillow can decode)
        full_size: Bounding box edge for the full image
        thumbnail_size: Bounding box edge for the thumbnail

    Returns:
        (full_jpeg_bytes, thumbnail_jpeg_bytes)

    Raises:
        ValidationException: If the bytes are not a decodable image
    """
    image = _to_rgb(_open(data))
    return (
        _encode(image, full_size, FULL_QUALITY),
        _encode(image, thumbnail_size, THUMBNAIL_QUALITY),
    )
