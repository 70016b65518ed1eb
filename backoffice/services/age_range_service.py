import logging

from sqlalchemy.orm import Session

from backoffice.core.exceptions import (
    AgeRangeOverlapException,
    ConflictException,
    NotFoundException,
    ValidationException,
)
from backoffice.models.age_range import AgeRange
from backoffice.models.tenant_context import TenantContext
from backoffice.repositories.age_range_repository import AgeRangeRepository
from backoffice.repositories.trip_price_group_repository import TripPriceGroupRepository
from backoffice.schemas.age_range_schemas import AgeRangeCreate, AgeRangeUpdate
from backoffice.services.age_range_overlap import OverlapStrategy, DEFAULT_STRATEGY, find_overlap
from backoffice.services.agency_service import AgencyService

logger = logging.getLogger(__name__)


class AgeRangeService:
    """
    Service for agency age ranges.

    Create and update validate in a fixed order: bound ordering, then
    name uniqueness, then overlap against the agency's other ranges.
    """

    def __init__(self, db: Session, strategy: OverlapStrategy = DEFAULT_STRATEGY):
        self.db = db
        self.repo = AgeRangeRepository(db)
        self.price_group_repo = TripPriceGroupRepository(db)
        self.agency_service = AgencyService(db)
        self.strategy = strategy

    def validate_no_overlap(
        self, agency_id: int, min_age: int, max_age: int, exclude_id: int | None = None
    ) -> None:
        """
        Raises:
            AgeRangeOverlapException: If [min_age, max_age] overlaps a stored range
        """
        existing = self.repo.get_by_agency(agency_id)
        conflict = find_overlap(min_age, max_age, existing, exclude_id, self.strategy)
        if conflict is not None:
            logger.info(
                "Age range %s-%s overlaps %r in agency %s",
                min_age,
                max_age,
                conflict.name,
                agency_id,
            )
            raise AgeRangeOverlapException(conflict.name, conflict.min_age, conflict.max_age)

    @staticmethod
    def _validate_bounds(min_age: int, max_age: int) -> None:
        if min_age >= max_age:
            raise ValidationException("Minimum age must be less than maximum age")

    def create_age_range(
        self, agency_id: int, data: AgeRangeCreate, tenant: TenantContext
    ) -> AgeRange:
        self.agency_service.get_agency(agency_id, tenant)

        self._validate_bounds(data.min_age, data.max_age)

        if self.repo.get_by_name_and_agency(data.name, agency_id):
            raise ConflictException("Age range name already in use in this agency")

        self.validate_no_overlap(agency_id, data.min_age, data.max_age)

        age_range = AgeRange(
            agency_id=agency_id,
            name=data.name,
            min_age=data.min_age,
            max_age=data.max_age,
            occupies_seat=data.occupies_seat,
        )
        return self.repo.create(age_range)

    def list_age_ranges(self, agency_id: int, tenant: TenantContext) -> list[AgeRange]:
        self.agency_service.get_agency(agency_id, tenant)
        return self.repo.get_by_agency(agency_id)

    def get_age_range(self, agency_id: int, age_range_id: int, tenant: TenantContext) -> AgeRange:
        self.agency_service.get_agency(agency_id, tenant)
        age_range = self.repo.get_by_id_and_agency(age_range_id, agency_id)
        if not age_range:
            raise NotFoundException("Age range not found in this agency")
        return age_range

    def update_age_range(
        self, agency_id: int, age_range_id: int, data: AgeRangeUpdate, tenant: TenantContext
    ) -> AgeRange:
        """
        Partially update an age range.

        Missing bounds are taken from the stored record, and the overlap
        check always runs against the current ranges, excluding this one.
        """
        age_range = self.get_age_range(agency_id, age_range_id, tenant)

        min_age = data.min_age if data.min_age is not None else age_range.min_age
        max_age = data.max_age if data.max_age is not None else age_range.max_age
        self._validate_bounds(min_age, max_age)

        if data.name is not None and data.name != age_range.name:
            if self.repo.get_by_name_and_agency(data.name, agency_id):
                raise ConflictException("Age range name already in use in this agency")

        self.validate_no_overlap(agency_id, min_age, max_age, exclude_id=age_range.id)

        if data.name is not None:
            age_range.name = data.name
        if data.occupies_seat is not None:
            age_range.occupies_seat = data.occupies_seat
        age_range.min_age = min_age
        age_range.max_age = max_age

        return self.repo.update(age_range)

    def delete_age_range(self, agency_id: int, age_range_id: int, tenant: TenantContext) -> None:
        """
        Raises:
            ConflictException: If trip price groups are priced for the range
        """
        age_range = self.get_age_range(agency_id, age_range_id, tenant)
        if self.price_group_repo.count_by_age_range(age_range.id):
            raise ConflictException("Age range is used by trip price groups and cannot be deleted")
        self.repo.delete(age_range)
