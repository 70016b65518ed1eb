from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class TenantCreate(BaseModel):
    """Create a tenant (superadmin only)"""

    slug: str = Field(
        ...,
        min_length=2,
        max_length=100,
        pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$",
        description="Immutable key used in X-Tenant-ID and subdomains",
    )
    name: str = Field(..., min_length=1, max_length=255)
    plan: str = Field(default="free", min_length=1, max_length=50)


class TenantUpdate(BaseModel):
    """Update tenant name or plan; the slug cannot change"""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    plan: Optional[str] = Field(None, min_length=1, max_length=50)


class TenantResponse(BaseModel):
    """Tenant details response"""

    id: int
    slug: str
    name: str
    plan: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class TenantListResponse(BaseModel):
    tenants: list[TenantResponse]
    total: int
