import logging
from collections.abc import Iterable

from backoffice.core.exceptions import StorageException
from backoffice.models.trip import Trip
from backoffice.storage import ImageStorage

logger = logging.getLogger(__name__)


def discard_trip_files(storage: ImageStorage | None, trips: Iterable[Trip]) -> None:
    """
    Delete the stored files of every image of the given trips.

    Best effort: a StorageException is logged and the next file is
    tried. Callers delete the records afterwards regardless.
    """
    if storage is None:
        return

    for trip in trips:
        for image in trip.images:
            for url in (image.image_url, image.thumbnail_url):
                try:
                    storage.delete(url)
                except StorageException:
                    logger.exception("Could not delete stored file %s of trip %s", url, trip.id)
