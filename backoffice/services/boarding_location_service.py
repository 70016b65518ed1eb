from sqlalchemy.orm import Session

from backoffice.core.exceptions import NotFoundException
from backoffice.models.boarding_location import BoardingLocation
from backoffice.models.tenant_context import TenantContext
from backoffice.repositories.boarding_location_repository import BoardingLocationRepository
from backoffice.schemas.boarding_location_schemas import BoardingLocationCreate, BoardingLocationUpdate
from backoffice.services.agency_service import AgencyService


class BoardingLocationService:
    """Service for the agency's boarding (pick-up) locations"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = BoardingLocationRepository(db)
        self.agency_service = AgencyService(db)

    def create_location(
        self, agency_id: int, data: BoardingLocationCreate, tenant: TenantContext
    ) -> BoardingLocation:
        self.agency_service.get_agency(agency_id, tenant)
        location = BoardingLocation(
            agency_id=agency_id,
            name=data.name,
            description=data.description,
            city=data.city,
        )
        return self.repo.create(location)

    def list_locations(self, agency_id: int, tenant: TenantContext) -> list[BoardingLocation]:
        self.agency_service.get_agency(agency_id, tenant)
        return self.repo.get_by_agency(agency_id)

    def get_location(self, agency_id: int, location_id: int, tenant: TenantContext) -> BoardingLocation:
        self.agency_service.get_agency(agency_id, tenant)
        location = self.repo.get_by_id_and_agency(location_id, agency_id)
        if not location:
            raise NotFoundException("Boarding location not found in this agency")
        return location

    def update_location(
        self, agency_id: int, location_id: int, data: BoardingLocationUpdate, tenant: TenantContext
    ) -> BoardingLocation:
        location = self.get_location(agency_id, location_id, tenant)

        if data.name is not None:
            location.name = data.name
        if "description" in data.model_fields_set:
            location.description = data.description
        if data.city is not None:
            location.city = data.city

        return self.repo.update(location)

    def delete_location(self, agency_id: int, location_id: int, tenant: TenantContext) -> None:
        location = self.get_location(agency_id, location_id, tenant)
        self.repo.delete(location)
