from functools import lru_cache

from backoffice.config import settings
from backoffice.storage.base import ImageStorage, StoredImage
from backoffice.storage.local import LocalImageStorage
from backoffice.storage.s3 import S3ImageStorage


@lru_cache
def get_storage() -> ImageStorage:
    """
    Image store selected by STORAGE_BACKEND ("s3" or "local").

    Used as a FastAPI dependency; tests override it.
    """
    if settings.STORAGE_BACKEND == "local":
        return LocalImageStorage(settings)
    if settings.STORAGE_BACKEND == "s3":
        return S3ImageStorage(settings)
    raise ValueError(f"Unknown STORAGE_BACKEND: {settings.STORAGE_BACKEND!r}")


__all__ = [
    "ImageStorage",
    "StoredImage",
    "LocalImageStorage",
    "S3ImageStorage",
    "get_storage",
]
