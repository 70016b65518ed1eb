from sqlalchemy.orm import Session
from backoffice.models.agency import Agency


class AgencyRepository:
    """Repository for Agency model operations with multi-tenant support"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_tenant(self, tenant_id: int) -> list[Agency]:
        """Get all agencies of a tenant"""
        return (
            self.db.query(Agency)
            .filter(Agency.tenant_id == tenant_id)
            .order_by(Agency.id)
            .all()
        )

    def get_by_id_and_tenant(self, agency_id: int, tenant_id: int) -> Agency | None:
        """
        Get agency ensuring it belongs to tenant (multi-tenant safety).

        Returns None if agency doesn't exist or belongs to another tenant.
        """
        return (
            self.db.query(Agency)
            .filter(Agency.id == agency_id, Agency.tenant_id == tenant_id)
            .first()
        )

    def get_by_cadastur(self, cadastur: str) -> Agency | None:
        return self.db.query(Agency).filter(Agency.cadastur == cadastur).first()

    def get_by_cnpj(self, cnpj: str) -> Agency | None:
        return self.db.query(Agency).filter(Agency.cnpj == cnpj).first()

    def create(self, agency: Agency) -> Agency:
        """Create new agency"""
        self.db.add(agency)
        self.db.commit()
        self.db.refresh(agency)
        return agency

    def update(self, agency: Agency) -> Agency:
        """Update existing agency"""
        self.db.commit()
        self.db.refresh(agency)
        return agency

    def delete(self, agency: Agency) -> None:
        """Delete agency (cascades to trips, age ranges and phones)"""
        self.db.delete(agency)
        self.db.commit()
