from sqlalchemy.orm import Session

from backoffice.core.exceptions import NotFoundException
from backoffice.models.tenant_context import TenantContext
from backoffice.models.trip_general_info import TripGeneralInfo
from backoffice.repositories.trip_general_info_repository import TripGeneralInfoRepository
from backoffice.schemas.trip_general_info_schemas import TripGeneralInfoCreate, TripGeneralInfoUpdate
from backoffice.services.trip_service import TripService


class TripGeneralInfoService:
    """Service for a trip's general information blocks"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = TripGeneralInfoRepository(db)
        self.trip_service = TripService(db)

    def create_info(
        self, agency_id: int, trip_id: int, data: TripGeneralInfoCreate, tenant: TenantContext
    ) -> TripGeneralInfo:
        self.trip_service.get_trip(agency_id, trip_id, tenant)
        info = TripGeneralInfo(
            trip_id=trip_id,
            title=data.title,
            description=data.description,
            display_order=data.display_order,
        )
        return self.repo.create(info)

    def list_info(self, agency_id: int, trip_id: int, tenant: TenantContext) -> list[TripGeneralInfo]:
        self.trip_service.get_trip(agency_id, trip_id, tenant)
        return self.repo.get_by_trip(trip_id)

    def get_info(self, agency_id: int, trip_id: int, info_id: int, tenant: TenantContext) -> TripGeneralInfo:
        self.trip_service.get_trip(agency_id, trip_id, tenant)
        info = self.repo.get_by_id_and_trip(info_id, trip_id)
        if not info:
            raise NotFoundException("General info item not found")
        return info

    def update_info(
        self,
        agency_id: int,
        trip_id: int,
        info_id: int,
        data: TripGeneralInfoUpdate,
        tenant: TenantContext,
    ) -> TripGeneralInfo:
        info = self.get_info(agency_id, trip_id, info_id, tenant)

        if data.title is not None:
            info.title = data.title
        if data.description is not None:
            info.description = data.description
        if data.display_order is not None:
            info.display_order = data.display_order

        return self.repo.update(info)

    def delete_info(self, agency_id: int, trip_id: int, info_id: int, tenant: TenantContext) -> None:
        info = self.get_info(agency_id, trip_id, info_id, tenant)
        self.repo.delete(info)
