from sqlalchemy.orm import Session

from backoffice.core.exceptions import ConflictException, NotFoundException
from backoffice.models.agency_phone import AgencyPhone, PhoneType
from backoffice.models.tenant_context import TenantContext
from backoffice.repositories.agency_phone_repository import AgencyPhoneRepository
from backoffice.schemas.agency_phone_schemas import AgencyPhoneCreate, AgencyPhoneUpdate
from backoffice.services.agency_service import AgencyService


class AgencyPhoneService:
    """
    Service for agency phones.

    Numbers are unique across every agency of every tenant.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = AgencyPhoneRepository(db)
        self.agency_service = AgencyService(db)

    def _ensure_number_free(self, number: str) -> None:
        if self.repo.get_by_number(number):
            raise ConflictException("Phone number already in use")

    def create_phone(self, agency_id: int, data: AgencyPhoneCreate, tenant: TenantContext) -> AgencyPhone:
        self.agency_service.get_agency(agency_id, tenant)
        self._ensure_number_free(data.number)

        phone = AgencyPhone(agency_id=agency_id, type=data.type, number=data.number)
        return self.repo.create(phone)

    def list_phones(self, agency_id: int, tenant: TenantContext) -> list[AgencyPhone]:
        self.agency_service.get_agency(agency_id, tenant)
        return self.repo.get_by_agency(agency_id)

    def get_main_phone(self, agency_id: int, tenant: TenantContext) -> AgencyPhone:
        """First phone of type "main" registered for the agency"""
        self.agency_service.get_agency(agency_id, tenant)
        phone = self.repo.get_by_type_and_agency(PhoneType.MAIN, agency_id)
        if not phone:
            raise NotFoundException("Main phone not found for this agency")
        return phone

    def get_phone(self, agency_id: int, phone_id: int, tenant: TenantContext) -> AgencyPhone:
        self.agency_service.get_agency(agency_id, tenant)
        phone = self.repo.get_by_id_and_agency(phone_id, agency_id)
        if not phone:
            raise NotFoundException("Phone not found in this agency")
        return phone

    def update_phone(
        self, agency_id: int, phone_id: int, data: AgencyPhoneUpdate, tenant: TenantContext
    ) -> AgencyPhone:
        phone = self.get_phone(agency_id, phone_id, tenant)

        if data.number is not None and data.number != phone.number:
            self._ensure_number_free(data.number)
            phone.number = data.number
        if data.type is not None:
            phone.type = data.type

        return self.repo.update(phone)

    def delete_phone(self, agency_id: int, phone_id: int, tenant: TenantContext) -> None:
        phone = self.get_phone(agency_id, phone_id, tenant)
        self.repo.delete(phone)
