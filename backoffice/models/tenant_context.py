"""Tenant context resolved for the current request."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TenantContext:
    """
    Tenant attached to a request by the tenant resolution stage.

    Attributes:
        tenant_id: Database ID of the resolved tenant
        tenant_slug: Slug the tenant was resolved from
    """

    tenant_id: int
    tenant_slug: str

    def __repr__(self) -> str:
        return f"<TenantContext(tenant_id={self.tenant_id}, slug='{self.tenant_slug}')>"
