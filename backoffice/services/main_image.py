import logging

from sqlalchemy.orm import Session

from backoffice.repositories.trip_image_repository import TripImageRepository
from backoffice.repositories.trip_repository import TripRepository

logger = logging.getLogger(__name__)


class MainImageManager:
    """
    Keeps "at most one main image per trip" and the trip's main image
    mirror (main_image_url / main_image_thumbnail_url) consistent.

    Steps are issued one by one, each committing on its own.
    """

    def __init__(self, db: Session):
        self.db = db
        self.image_repo = TripImageRepository(db)
        self.trip_repo = TripRepository(db)

    def clear_other_mains(self, trip_id: int, keep_image_id: int | None = None) -> None:
        cleared = self.image_repo.unset_main_images(trip_id, keep_image_id)
        if cleared:
            logger.info("Unset main flag on %d image(s) of trip %s", cleared, trip_id)

    def mirror_to_trip(self, trip_id: int, image_url: str, thumbnail_url: str) -> None:
        self.trip_repo.update_main_image(trip_id, image_url, thumbnail_url)
        logger.info("Trip %s main image set to %s", trip_id, image_url)

    def clear_trip_mirror(self, trip_id: int) -> None:
        self.trip_repo.update_main_image(trip_id, None, None)
        logger.info("Trip %s main image cleared", trip_id)
