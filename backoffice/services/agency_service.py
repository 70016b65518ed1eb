import logging

from sqlalchemy.orm import Session

from backoffice.core.exceptions import ConflictException, NotFoundException
from backoffice.models.agency import Agency
from backoffice.models.tenant_context import TenantContext
from backoffice.repositories.agency_repository import AgencyRepository
from backoffice.repositories.tenant_repository import TenantRepository
from backoffice.schemas.agency_schemas import AgencyCreate, AgencyUpdate
from backoffice.services.image_cleanup import discard_trip_files
from backoffice.storage import ImageStorage

logger = logging.getLogger(__name__)


class AgencyService:
    """Service for agency business logic"""

    def __init__(self, db: Session, storage: ImageStorage | None = None):
        self.db = db
        self.storage = storage
        self.agency_repo = AgencyRepository(db)
        self.tenant_repo = TenantRepository(db)

    def _ensure_unique(self, cadastur: str | None, cnpj: str | None, agency_id: int | None = None) -> None:
        if cadastur is not None:
            existing = self.agency_repo.get_by_cadastur(cadastur)
            if existing and existing.id != agency_id:
                raise ConflictException("CADASTUR already in use by another agency")
        if cnpj is not None:
            existing = self.agency_repo.get_by_cnpj(cnpj)
            if existing and existing.id != agency_id:
                raise ConflictException("CNPJ already in use by another agency")

    def create_agency(self, tenant_id: int, data: AgencyCreate) -> Agency:
        """
        Create an agency under a tenant.

        Raises:
            NotFoundException: If the tenant does not exist
            ConflictException: If CADASTUR or CNPJ is already registered
        """
        if not self.tenant_repo.get_by_id(tenant_id):
            raise NotFoundException("Tenant not found")

        self._ensure_unique(data.cadastur, data.cnpj)

        agency = Agency(
            tenant_id=tenant_id,
            name=data.name,
            cadastur=data.cadastur,
            cnpj=data.cnpj,
            description=data.description,
        )
        agency = self.agency_repo.create(agency)
        logger.info("Created agency %s in tenant %s", agency.id, tenant_id)
        return agency

    def list_agencies(self, tenant_id: int) -> list[Agency]:
        if not self.tenant_repo.get_by_id(tenant_id):
            raise NotFoundException("Tenant not found")
        return self.agency_repo.get_by_tenant(tenant_id)

    def get_agency(self, agency_id: int, tenant: TenantContext) -> Agency:
        """
        Get agency ensuring it belongs to the resolved tenant.

        Raises:
            NotFoundException: If agency not found or belongs to another tenant
        """
        agency = self.agency_repo.get_by_id_and_tenant(agency_id, tenant.tenant_id)
        if not agency:
            raise NotFoundException("Agency not found")
        return agency

    def update_agency(self, agency_id: int, data: AgencyUpdate, tenant: TenantContext) -> Agency:
        agency = self.get_agency(agency_id, tenant)

        self._ensure_unique(
            data.cadastur if data.cadastur != agency.cadastur else None,
            data.cnpj if data.cnpj != agency.cnpj else None,
            agency_id=agency.id,
        )

        if data.name is not None:
            agency.name = data.name
        if data.cadastur is not None:
            agency.cadastur = data.cadastur
        if data.cnpj is not None:
            agency.cnpj = data.cnpj
        if "description" in data.model_fields_set:
            agency.description = data.description

        return self.agency_repo.update(agency)

    def delete_agency(self, agency_id: int, tenant: TenantContext) -> None:
        """Delete agency and its catalogue; stored trip images are removed best effort"""
        agency = self.get_agency(agency_id, tenant)
        discard_trip_files(self.storage, agency.trips)
        self.agency_repo.delete(agency)
        logger.info("Deleted agency %s", agency_id)
