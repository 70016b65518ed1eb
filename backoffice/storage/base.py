from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, UTC
from typing import Protocol


@dataclass(frozen=True)
class StoredImage:
    """Public URLs of a stored image and its thumbnail"""

    full_url: str
    thumbnail_url: str


class ImageStorage(Protocol):
    def store(self, data: bytes, folder: str) -> StoredImage:
        ...

    def delete(self, url: str) -> None:
        ...


def build_keys(folder: str) -> tuple[str, str]:
    """
    Object keys for a new image pair.

    Both keys share a millisecond timestamp and a random suffix:
    "trips/7/1718000000000-<uuid>-original.jpg" and "...-thumbnail.jpg".
    """
    stamp = int(datetime.now(UTC).timestamp() * 1000)
    base = f"{folder.strip('/')}/{stamp}-{uuid.uuid4()}"
    return f"{base}-original.jpg", f"{base}-thumbnail.jpg"
