import logging
from pathlib import Path

from backoffice.config import Settings
from backoffice.core.exceptions import StorageException
from backoffice.storage.base import StoredImage, build_keys
from backoffice.storage.images import transcode

logger = logging.getLogger(__name__)


class LocalImageStorage:
    """
    Image store writing to a local directory, for development.

    Files land under STORAGE_LOCAL_PATH and are addressed as
    STORAGE_PUBLIC_URL + "/" + key.
    """

    def __init__(self, settings: Settings, base_dir: Path | None = None):
        self.settings = settings
        self.base_dir = Path(base_dir or settings.STORAGE_LOCAL_PATH).resolve()
        self.public_url = settings.STORAGE_PUBLIC_URL.rstrip("/")

    def _path_for(self, key: str) -> Path:
        path = (self.base_dir / key).resolve()
        if not path.is_relative_to(self.base_dir):
            raise StorageException(f"Refusing path outside storage root: {key}")
        return path

    def _write(self, key: str, body: bytes) -> None:
        path = self._path_for(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(body)
        except OSError as e:
            logger.exception("Local write failed for %s", path)
            raise StorageException(f"Failed to store image: {e}") from e

    def store(self, data: bytes, folder: str) -> StoredImage:
        full, thumbnail = transcode(
            data, self.settings.IMAGE_MAX_SIZE, self.settings.THUMBNAIL_MAX_SIZE
        )
        full_key, thumbnail_key = build_keys(folder)

        self._write(full_key, full)
        self._write(thumbnail_key, thumbnail)

        logger.info("Stored image %s under %s", full_key, self.base_dir)
        return StoredImage(
            full_url=f"{self.public_url}/{full_key}",
            thumbnail_url=f"{self.public_url}/{thumbnail_key}",
        )

    def delete(self, url: str) -> None:
        prefix = f"{self.public_url}/"
        if not url.startswith(prefix):
            logger.warning("URL %s is not served from local storage; skipping delete", url)
            return

        path = self._path_for(url[len(prefix):])
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.exception("Local delete failed for %s", path)
            raise StorageException(f"Failed to delete image: {e}") from e

        logger.info("Deleted image %s", path)
