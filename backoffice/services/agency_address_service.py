from sqlalchemy.orm import Session

from backoffice.core.exceptions import NotFoundException
from backoffice.models.agency_address import AgencyAddress, AddressType
from backoffice.models.tenant_context import TenantContext
from backoffice.repositories.agency_address_repository import AgencyAddressRepository
from backoffice.schemas.agency_address_schemas import AgencyAddressCreate, AgencyAddressUpdate
from backoffice.services.agency_service import AgencyService


class AgencyAddressService:
    """Service for agency postal addresses"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = AgencyAddressRepository(db)
        self.agency_service = AgencyService(db)

    def create_address(
        self, agency_id: int, data: AgencyAddressCreate, tenant: TenantContext
    ) -> AgencyAddress:
        self.agency_service.get_agency(agency_id, tenant)
        address = AgencyAddress(agency_id=agency_id, **data.model_dump())
        return self.repo.create(address)

    def list_addresses(self, agency_id: int, tenant: TenantContext) -> list[AgencyAddress]:
        self.agency_service.get_agency(agency_id, tenant)
        return self.repo.get_by_agency(agency_id)

    def get_main_address(self, agency_id: int, tenant: TenantContext) -> AgencyAddress:
        """First address of type "main" registered for the agency"""
        self.agency_service.get_agency(agency_id, tenant)
        address = self.repo.get_by_type_and_agency(AddressType.MAIN, agency_id)
        if not address:
            raise NotFoundException("Main address not found for this agency")
        return address

    def get_address(self, agency_id: int, address_id: int, tenant: TenantContext) -> AgencyAddress:
        self.agency_service.get_agency(agency_id, tenant)
        address = self.repo.get_by_id_and_agency(address_id, agency_id)
        if not address:
            raise NotFoundException("Address not found in this agency")
        return address

    def update_address(
        self, agency_id: int, address_id: int, data: AgencyAddressUpdate, tenant: TenantContext
    ) -> AgencyAddress:
        address = self.get_address(agency_id, address_id, tenant)

        if data.type is not None:
            address.type = data.type
        if data.address is not None:
            address.address = data.address
        if data.number is not None:
            address.number = data.number
        if "complement" in data.model_fields_set:
            address.complement = data.complement
        if data.neighborhood is not None:
            address.neighborhood = data.neighborhood
        if data.city is not None:
            address.city = data.city
        if data.state is not None:
            address.state = data.state
        if data.zip_code is not None:
            address.zip_code = data.zip_code

        return self.repo.update(address)

    def delete_address(self, agency_id: int, address_id: int, tenant: TenantContext) -> None:
        address = self.get_address(agency_id, address_id, tenant)
        self.repo.delete(address)
