import logging

from sqlalchemy.orm import Session

from backoffice.core.exceptions import NotFoundException, ValidationException
from backoffice.models.tenant_context import TenantContext
from backoffice.models.trip_price_group import TripAgePriceGroup
from backoffice.repositories.age_range_repository import AgeRangeRepository
from backoffice.repositories.trip_price_group_repository import TripPriceGroupRepository
from backoffice.schemas.trip_price_group_schemas import TripPriceGroupCreate, TripPriceGroupUpdate
from backoffice.services.trip_service import TripService

logger = logging.getLogger(__name__)


def validate_prices(final_price: float, original_price: float | None) -> None:
    """
    Raises:
        ValidationException: If an original price is set and is not above the final price
    """
    if original_price is not None and float(original_price) <= float(final_price):
        raise ValidationException("Original price must be greater than final price")


class TripPriceGroupService:
    """
    Service for a trip's prices per age range.

    The age range must belong to the trip's agency. Updates merge the
    sent fields with the stored ones before the price rule is checked.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = TripPriceGroupRepository(db)
        self.age_range_repo = AgeRangeRepository(db)
        self.trip_service = TripService(db)

    def _ensure_age_range(self, age_range_id: int, agency_id: int) -> None:
        if not self.age_range_repo.get_by_id_and_agency(age_range_id, agency_id):
            raise NotFoundException("Age range not found in this agency")

    def create_price_group(
        self, agency_id: int, trip_id: int, data: TripPriceGroupCreate, tenant: TenantContext
    ) -> TripAgePriceGroup:
        self.trip_service.get_trip(agency_id, trip_id, tenant)
        self._ensure_age_range(data.age_range_id, agency_id)
        validate_prices(data.final_price, data.original_price)

        group = TripAgePriceGroup(
            trip_id=trip_id,
            age_range_id=data.age_range_id,
            final_price=data.final_price,
            original_price=data.original_price,
            display_order=data.display_order,
            description=data.description,
            is_active=data.is_active,
        )
        group = self.repo.create(group)
        logger.info("Priced trip %s for age range %s at %s", trip_id, group.age_range_id, group.final_price)
        return group

    def list_price_groups(
        self, agency_id: int, trip_id: int, tenant: TenantContext
    ) -> list[TripAgePriceGroup]:
        self.trip_service.get_trip(agency_id, trip_id, tenant)
        return self.repo.get_by_trip(trip_id)

    def get_price_group(
        self, agency_id: int, trip_id: int, group_id: int, tenant: TenantContext
    ) -> TripAgePriceGroup:
        self.trip_service.get_trip(agency_id, trip_id, tenant)
        group = self.repo.get_by_id_and_trip(group_id, trip_id)
        if not group:
            raise NotFoundException("Price group not found for this trip")
        return group

    def update_price_group(
        self,
        agency_id: int,
        trip_id: int,
        group_id: int,
        data: TripPriceGroupUpdate,
        tenant: TenantContext,
    ) -> TripAgePriceGroup:
        group = self.get_price_group(agency_id, trip_id, group_id, tenant)

        final_price = data.final_price if data.final_price is not None else group.final_price
        if "original_price" in data.model_fields_set:
            original_price = data.original_price
        else:
            original_price = group.original_price
        validate_prices(final_price, original_price)

        if data.age_range_id is not None and data.age_range_id != group.age_range_id:
            self._ensure_age_range(data.age_range_id, agency_id)
            group.age_range_id = data.age_range_id

        group.final_price = final_price
        group.original_price = original_price
        if data.display_order is not None:
            group.display_order = data.display_order
        if "description" in data.model_fields_set:
            group.description = data.description
        if data.is_active is not None:
            group.is_active = data.is_active

        return self.repo.update(group)

    def delete_price_group(self, agency_id: int, trip_id: int, group_id: int, tenant: TenantContext) -> None:
        group = self.get_price_group(agency_id, trip_id, group_id, tenant)
        self.repo.delete(group)
