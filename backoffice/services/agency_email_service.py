from sqlalchemy.orm import Session

from backoffice.core.exceptions import ConflictException, NotFoundException
from backoffice.models.agency_email import AgencyEmail
from backoffice.models.tenant_context import TenantContext
from backoffice.repositories.agency_email_repository import AgencyEmailRepository
from backoffice.schemas.agency_email_schemas import AgencyEmailCreate, AgencyEmailUpdate
from backoffice.services.agency_service import AgencyService


class AgencyEmailService:
    """
    Service for agency e-mails.

    Addresses are unique across every agency of every tenant.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = AgencyEmailRepository(db)
        self.agency_service = AgencyService(db)

    def _ensure_email_free(self, email: str) -> None:
        if self.repo.get_by_email(email):
            raise ConflictException("E-mail already in use")

    def create_email(self, agency_id: int, data: AgencyEmailCreate, tenant: TenantContext) -> AgencyEmail:
        self.agency_service.get_agency(agency_id, tenant)
        self._ensure_email_free(data.email)

        email = AgencyEmail(agency_id=agency_id, email=data.email)
        return self.repo.create(email)

    def list_emails(self, agency_id: int, tenant: TenantContext) -> list[AgencyEmail]:
        self.agency_service.get_agency(agency_id, tenant)
        return self.repo.get_by_agency(agency_id)

    def get_main_email(self, agency_id: int, tenant: TenantContext) -> AgencyEmail:
        """Earliest e-mail registered for the agency"""
        self.agency_service.get_agency(agency_id, tenant)
        email = self.repo.get_first_by_agency(agency_id)
        if not email:
            raise NotFoundException("Main e-mail not found for this agency")
        return email

    def get_email(self, agency_id: int, email_id: int, tenant: TenantContext) -> AgencyEmail:
        self.agency_service.get_agency(agency_id, tenant)
        email = self.repo.get_by_id_and_agency(email_id, agency_id)
        if not email:
            raise NotFoundException("E-mail not found in this agency")
        return email

    def update_email(
        self, agency_id: int, email_id: int, data: AgencyEmailUpdate, tenant: TenantContext
    ) -> AgencyEmail:
        email = self.get_email(agency_id, email_id, tenant)

        if data.email is not None and data.email != email.email:
            self._ensure_email_free(data.email)
            email.email = data.email

        return self.repo.update(email)

    def delete_email(self, agency_id: int, email_id: int, tenant: TenantContext) -> None:
        email = self.get_email(agency_id, email_id, tenant)
        self.repo.delete(email)
