from sqlalchemy.orm import Session

from backoffice.core.exceptions import NotFoundException
from backoffice.models.tenant_context import TenantContext
from backoffice.models.trip_item import TripItem
from backoffice.repositories.trip_item_repository import TripItemRepository
from backoffice.schemas.trip_item_schemas import TripItemCreate, TripItemUpdate
from backoffice.services.trip_service import TripService


class TripItemService:
    """Service for items included in / excluded from a trip"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = TripItemRepository(db)
        self.trip_service = TripService(db)

    def create_item(
        self, agency_id: int, trip_id: int, data: TripItemCreate, tenant: TenantContext
    ) -> TripItem:
        self.trip_service.get_trip(agency_id, trip_id, tenant)
        item = TripItem(trip_id=trip_id, name=data.name, is_included=data.is_included)
        return self.repo.create(item)

    def list_items(self, agency_id: int, trip_id: int, tenant: TenantContext) -> list[TripItem]:
        self.trip_service.get_trip(agency_id, trip_id, tenant)
        return self.repo.get_by_trip(trip_id)

    def get_item(self, agency_id: int, trip_id: int, item_id: int, tenant: TenantContext) -> TripItem:
        self.trip_service.get_trip(agency_id, trip_id, tenant)
        item = self.repo.get_by_id_and_trip(item_id, trip_id)
        if not item:
            raise NotFoundException("Trip item not found")
        return item

    def update_item(
        self,
        agency_id: int,
        trip_id: int,
        item_id: int,
        data: TripItemUpdate,
        tenant: TenantContext,
    ) -> TripItem:
        item = self.get_item(agency_id, trip_id, item_id, tenant)

        if data.name is not None:
            item.name = data.name
        if data.is_included is not None:
            item.is_included = data.is_included

        return self.repo.update(item)

    def delete_item(self, agency_id: int, trip_id: int, item_id: int, tenant: TenantContext) -> None:
        item = self.get_item(agency_id, trip_id, item_id, tenant)
        self.repo.delete(item)
