import logging
from datetime import datetime, UTC

from sqlalchemy.orm import Session

from backoffice.core.exceptions import (
    ConflictException,
    NotFoundException,
    ValidationException,
)
from backoffice.models.tenant_context import TenantContext
from backoffice.models.trip import Trip
from backoffice.repositories.cancellation_policy_repository import CancellationPolicyRepository
from backoffice.repositories.category_repository import CategoryRepository
from backoffice.repositories.trip_repository import TripRepository
from backoffice.schemas.trip_schemas import TripCreate, TripUpdate
from backoffice.services.agency_service import AgencyService
from backoffice.services.image_cleanup import discard_trip_files
from backoffice.storage import ImageStorage

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class TripService:
    """Service for trip business logic"""

    def __init__(self, db: Session, storage: ImageStorage | None = None):
        self.db = db
        self.repo = TripRepository(db)
        self.category_repo = CategoryRepository(db)
        self.policy_repo = CancellationPolicyRepository(db)
        self.agency_service = AgencyService(db)
        self.storage = storage

    @staticmethod
    def _validate_dates(departure_date: datetime, return_date: datetime) -> None:
        if _as_utc(return_date) < _as_utc(departure_date):
            raise ValidationException("Return date must be on or after departure date")

    def _ensure_slug_free(self, slug: str, agency_id: int) -> None:
        if self.repo.get_by_slug_and_agency(slug, agency_id):
            raise ConflictException(f"Trip slug already in use in this agency: {slug}")

    def _ensure_links(self, agency_id: int, category_id: int | None, policy_id: int | None) -> None:
        """Category and cancellation policy must belong to the trip's agency"""
        if category_id is not None and not self.category_repo.get_by_id_and_agency(category_id, agency_id):
            raise NotFoundException("Category not found in this agency")
        if policy_id is not None and not self.policy_repo.get_by_id_and_agency(policy_id, agency_id):
            raise NotFoundException("Cancellation policy not found in this agency")

    def create_trip(self, agency_id: int, data: TripCreate, tenant: TenantContext) -> Trip:
        self.agency_service.get_agency(agency_id, tenant)
        self._validate_dates(data.departure_date, data.return_date)
        self._ensure_slug_free(data.slug, agency_id)
        self._ensure_links(agency_id, data.category_id, data.cancellation_policy_id)

        trip = Trip(
            agency_id=agency_id,
            slug=data.slug,
            destination=data.destination,
            description=data.description,
            video_url=data.video_url,
            departure_date=data.departure_date,
            return_date=data.return_date,
            total_seats=data.total_seats,
            status=data.status,
            category_id=data.category_id,
            cancellation_policy_id=data.cancellation_policy_id,
        )
        trip = self.repo.create(trip)
        logger.info("Created trip %s (%s) for agency %s", trip.slug, trip.id, agency_id)
        return trip

    def list_trips(self, agency_id: int, tenant: TenantContext) -> list[Trip]:
        self.agency_service.get_agency(agency_id, tenant)
        return self.repo.get_by_agency(agency_id)

    def get_trip(self, agency_id: int, trip_id: int, tenant: TenantContext) -> Trip:
        """
        Get trip through the full tenant -> agency -> trip chain.

        Raises:
            NotFoundException: If any link of the chain is missing
        """
        self.agency_service.get_agency(agency_id, tenant)
        trip = self.repo.get_by_id_and_agency(trip_id, agency_id)
        if not trip:
            raise NotFoundException("Trip not found in this agency")
        return trip

    def update_trip(
        self, agency_id: int, trip_id: int, data: TripUpdate, tenant: TenantContext
    ) -> Trip:
        trip = self.get_trip(agency_id, trip_id, tenant)

        self._validate_dates(
            data.departure_date or trip.departure_date,
            data.return_date or trip.return_date,
        )
        if data.slug is not None and data.slug != trip.slug:
            self._ensure_slug_free(data.slug, agency_id)
        self._ensure_links(agency_id, data.category_id, data.cancellation_policy_id)

        if data.slug is not None:
            trip.slug = data.slug
        if data.destination is not None:
            trip.destination = data.destination
        if "description" in data.model_fields_set:
            trip.description = data.description
        if "video_url" in data.model_fields_set:
            trip.video_url = data.video_url
        if data.departure_date is not None:
            trip.departure_date = data.departure_date
        if data.return_date is not None:
            trip.return_date = data.return_date
        if data.total_seats is not None:
            trip.total_seats = data.total_seats
        if data.status is not None:
            trip.status = data.status
        if "category_id" in data.model_fields_set:
            trip.category_id = data.category_id
        if "cancellation_policy_id" in data.model_fields_set:
            trip.cancellation_policy_id = data.cancellation_policy_id

        return self.repo.update(trip)

    def delete_trip(self, agency_id: int, trip_id: int, tenant: TenantContext) -> None:
        """
        Delete trip with its images and items.

        Stored image files are removed first; a failed file delete is
        logged and does not block the record delete.
        """
        trip = self.get_trip(agency_id, trip_id, tenant)

        discard_trip_files(self.storage, [trip])
        self.repo.delete(trip)
        logger.info("Deleted trip %s of agency %s", trip_id, agency_id)
