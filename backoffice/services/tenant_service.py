import logging

from sqlalchemy.orm import Session

from backoffice.core.exceptions import ConflictException, NotFoundException
from backoffice.models.tenant import Tenant
from backoffice.repositories.tenant_repository import TenantRepository
from backoffice.schemas.tenant_schemas import TenantCreate, TenantUpdate
from backoffice.services.image_cleanup import discard_trip_files
from backoffice.storage import ImageStorage

logger = logging.getLogger(__name__)


class TenantService:
    """Service layer for tenant administration (superadmin surface)"""

    def __init__(self, db: Session, storage: ImageStorage | None = None):
        self.db = db
        self.storage = storage
        self.tenant_repo = TenantRepository(db)

    def create_tenant(self, data: TenantCreate) -> Tenant:
        """
        Create a new tenant.

        Raises:
            ConflictException: If the slug is already taken
        """
        if self.tenant_repo.get_by_slug(data.slug):
            raise ConflictException(f"Tenant slug already in use: {data.slug}")

        tenant = Tenant(slug=data.slug, name=data.name, plan=data.plan)
        tenant = self.tenant_repo.create(tenant)
        logger.info("Created tenant %s (%s)", tenant.slug, tenant.id)
        return tenant

    def list_tenants(self) -> list[Tenant]:
        return self.tenant_repo.get_all()

    def get_tenant(self, tenant_id: int) -> Tenant:
        tenant = self.tenant_repo.get_by_id(tenant_id)
        if not tenant:
            raise NotFoundException("Tenant not found")
        return tenant

    def get_tenant_by_slug(self, slug: str) -> Tenant:
        tenant = self.tenant_repo.get_by_slug(slug)
        if not tenant:
            raise NotFoundException(f"Tenant not found: {slug}")
        return tenant

    def update_tenant(self, tenant_id: int, data: TenantUpdate) -> Tenant:
        """Update tenant name and/or plan. The slug is immutable."""
        tenant = self.get_tenant(tenant_id)

        if data.name is not None:
            tenant.name = data.name
        if data.plan is not None:
            tenant.plan = data.plan

        return self.tenant_repo.update(tenant)

    def delete_tenant(self, tenant_id: int) -> None:
        """Delete tenant and everything under it (cascade), stored trip images included"""
        tenant = self.get_tenant(tenant_id)
        for agency in tenant.agencies:
            discard_trip_files(self.storage, agency.trips)
        self.tenant_repo.delete(tenant)
        logger.info("Deleted tenant %s (%s)", tenant.slug, tenant_id)
