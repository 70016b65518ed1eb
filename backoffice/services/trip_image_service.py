import logging

from sqlalchemy.orm import Session

from backoffice.core.exceptions import NotFoundException, StorageException, ValidationException
from backoffice.models.tenant_context import TenantContext
from backoffice.models.trip_image import TripImage
from backoffice.repositories.trip_image_repository import TripImageRepository
from backoffice.schemas.trip_image_schemas import (
    ImageOperationType,
    TripImageUpdate,
    TripImageUpload,
)
from backoffice.services.main_image import MainImageManager
from backoffice.services.trip_service import TripService
from backoffice.storage import ImageStorage
from backoffice.storage.images import ensure_image

logger = logging.getLogger(__name__)


def trip_folder(trip_id: int) -> str:
    return f"trips/{trip_id}"


class TripImageService:
    """
    Service for trip images.

    Every mutation keeps two rules:
    - at most one image of a trip has is_main set
    - the trip's main_image_url / main_image_thumbnail_url equal the
      main image's URLs, or are empty when there is no main image

    Steps run in a fixed order (file store, other mains, record, trip
    mirror) without a surrounding transaction; a failure part way
    surfaces as-is.
    """

    def __init__(self, db: Session, storage: ImageStorage):
        self.db = db
        self.storage = storage
        self.repo = TripImageRepository(db)
        self.trip_service = TripService(db)
        self.main_image = MainImageManager(db)

    def upload_image(
        self,
        agency_id: int,
        trip_id: int,
        content: bytes | None,
        data: TripImageUpload,
        tenant: TenantContext,
    ) -> TripImage:
        """
        Store a new image file and register it on the trip.

        Raises:
            ValidationException: If no file was sent or operation_type is not ADD
        """
        self.trip_service.get_trip(agency_id, trip_id, tenant)

        if not content:
            raise ValidationException("Image file is required")
        if data.operation_type != ImageOperationType.ADD:
            raise ValidationException("operation_type must be ADD for uploads")
        ensure_image(content)

        stored = self.storage.store(content, trip_folder(trip_id))

        if data.is_main:
            self.main_image.clear_other_mains(trip_id)

        image = TripImage(
            trip_id=trip_id,
            image_url=stored.full_url,
            thumbnail_url=stored.thumbnail_url,
            is_main=data.is_main,
            display_order=data.display_order,
        )
        image = self.repo.create(image)

        if image.is_main:
            self.main_image.mirror_to_trip(trip_id, image.image_url, image.thumbnail_url)

        logger.info("Added image %s to trip %s (main=%s)", image.id, trip_id, image.is_main)
        return image

    def list_images(self, agency_id: int, trip_id: int, tenant: TenantContext) -> list[TripImage]:
        self.trip_service.get_trip(agency_id, trip_id, tenant)
        return self.repo.get_by_trip(trip_id)

    def get_image(self, agency_id: int, trip_id: int, image_id: int, tenant: TenantContext) -> TripImage:
        self.trip_service.get_trip(agency_id, trip_id, tenant)
        image = self.repo.get_by_id_and_trip(image_id, trip_id)
        if not image:
            raise NotFoundException("Trip image not found")
        return image

    def update_image(
        self,
        agency_id: int,
        trip_id: int,
        image_id: int,
        content: bytes | None,
        data: TripImageUpdate,
        tenant: TenantContext,
    ) -> TripImage:
        """
        Update display order / main flag and optionally replace the file.

        A replacement file requires operation_type UPDATE and must decode
        as an image; the old files are deleted only after that check, before
        the new one is stored.
        """
        image = self.get_image(agency_id, trip_id, image_id, tenant)
        was_main = image.is_main
        will_be_main = data.is_main if data.is_main is not None else was_main

        if content:
            if data.operation_type != ImageOperationType.UPDATE:
                raise ValidationException("operation_type must be UPDATE when replacing the file")
            ensure_image(content)

            self.storage.delete(image.image_url)
            self.storage.delete(image.thumbnail_url)
            stored = self.storage.store(content, trip_folder(trip_id))
            image.image_url = stored.full_url
            image.thumbnail_url = stored.thumbnail_url

        if will_be_main and not was_main:
            self.main_image.clear_other_mains(trip_id, keep_image_id=image.id)

        image.is_main = will_be_main
        if data.display_order is not None:
            image.display_order = data.display_order
        image = self.repo.update(image)

        if image.is_main:
            self.main_image.mirror_to_trip(trip_id, image.image_url, image.thumbnail_url)
        elif was_main:
            self.main_image.clear_trip_mirror(trip_id)

        return image

    def remove_image(self, agency_id: int, trip_id: int, image_id: int, tenant: TenantContext) -> None:
        """
        Delete the stored files, then the record.

        No other image is promoted when the main image is removed; the
        trip mirror is cleared instead.
        """
        image = self.get_image(agency_id, trip_id, image_id, tenant)
        was_main = image.is_main

        for url in (image.image_url, image.thumbnail_url):
            try:
                self.storage.delete(url)
            except StorageException:
                logger.exception("Could not delete stored file %s of image %s", url, image_id)

        self.repo.delete(image)

        if was_main:
            self.main_image.clear_trip_mirror(trip_id)

        logger.info("Removed image %s from trip %s", image_id, trip_id)
