"""Repository for Tenant model operations."""

from sqlalchemy.orm import Session
from backoffice.models.tenant import Tenant


class TenantRepository:
    """Repository for Tenant model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, tenant_id: int) -> Tenant | None:
        """
        Get tenant by ID.

        Args:
            tenant_id: Tenant ID

        Returns:
            Tenant object or None if not found
        """
        return self.db.query(Tenant).filter(Tenant.id == tenant_id).first()

    def get_by_slug(self, slug: str) -> Tenant | None:
        """
        Get tenant by its slug (the key used by tenant resolution).

        Args:
            slug: Tenant slug from X-Tenant-ID header or host

        Returns:
            Tenant object or None if not found
        """
        return self.db.query(Tenant).filter(Tenant.slug == slug).first()

    def get_all(self) -> list[Tenant]:
        """Get all tenants ordered by creation"""
        return self.db.query(Tenant).order_by(Tenant.id).all()

    def create(self, tenant: Tenant) -> Tenant:
        self.db.add(tenant)
        self.db.commit()
        self.db.refresh(tenant)
        return tenant

    def update(self, tenant: Tenant) -> Tenant:
        self.db.commit()
        self.db.refresh(tenant)
        return tenant

    def delete(self, tenant: Tenant) -> None:
        """
        Delete a tenant.

        WARNING: This cascades to every agency of the tenant and, through
        them, to all trips, age ranges, phones, images and items.
        """
        self.db.delete(tenant)
        self.db.commit()
