from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from backoffice.database import get_db
from backoffice.dependencies import RequestContext, authorize_request
from backoffice.routes import PLATFORM_ADMIN
from backoffice.schemas.agency_schemas import AgencyCreate, AgencyListResponse, AgencyResponse
from backoffice.schemas.tenant_schemas import (
    TenantCreate,
    TenantListResponse,
    TenantResponse,
    TenantUpdate,
)
from backoffice.services.agency_service import AgencyService
from backoffice.services.tenant_service import TenantService
from backoffice.storage import ImageStorage, get_storage

router = APIRouter()


@router.post("", response_model=TenantResponse, status_code=status.HTTP_201_CREATED)
async def create_tenant(
    data: TenantCreate,
    ctx: RequestContext = Depends(authorize_request(PLATFORM_ADMIN)),
    db: Session = Depends(get_db),
):
    """
    Create a new tenant.

    - **Requires superadmin**
    - Slug must be unique across all tenants and cannot be changed later
    """
    service = TenantService(db)
    return service.create_tenant(data)


@router.get("", response_model=TenantListResponse)
async def list_tenants(
    ctx: RequestContext = Depends(authorize_request(PLATFORM_ADMIN)),
    db: Session = Depends(get_db),
):
    """List all tenants"""
    service = TenantService(db)
    tenants = service.list_tenants()
    return TenantListResponse(tenants=tenants, total=len(tenants))


@router.get("/slug/{slug}", response_model=TenantResponse)
async def get_tenant_by_slug(
    slug: str,
    ctx: RequestContext = Depends(authorize_request(PLATFORM_ADMIN)),
    db: Session = Depends(get_db),
):
    service = TenantService(db)
    return service.get_tenant_by_slug(slug)


@router.get("/{tenant_id}", response_model=TenantResponse)
async def get_tenant(
    tenant_id: int,
    ctx: RequestContext = Depends(authorize_request(PLATFORM_ADMIN)),
    db: Session = Depends(get_db),
):
    service = TenantService(db)
    return service.get_tenant(tenant_id)


@router.patch("/{tenant_id}", response_model=TenantResponse)
async def update_tenant(
    tenant_id: int,
    data: TenantUpdate,
    ctx: RequestContext = Depends(authorize_request(PLATFORM_ADMIN)),
    db: Session = Depends(get_db),
):
    """Update tenant name or plan"""
    service = TenantService(db)
    return service.update_tenant(tenant_id, data)


@router.delete("/{tenant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tenant(
    tenant_id: int,
    ctx: RequestContext = Depends(authorize_request(PLATFORM_ADMIN)),
    db: Session = Depends(get_db),
    storage: ImageStorage = Depends(get_storage),
):
    """
    Delete a tenant.

    WARNING: cascades to all agencies of the tenant and their catalogue.
    """
    service = TenantService(db, storage)
    service.delete_tenant(tenant_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{tenant_id}/agencies",
    response_model=AgencyResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_agency(
    tenant_id: int,
    data: AgencyCreate,
    ctx: RequestContext = Depends(authorize_request(PLATFORM_ADMIN)),
    db: Session = Depends(get_db),
):
    """Create an agency under a tenant. CADASTUR and CNPJ must be unique."""
    service = AgencyService(db)
    return service.create_agency(tenant_id, data)


@router.get("/{tenant_id}/agencies", response_model=AgencyListResponse)
async def list_agencies(
    tenant_id: int,
    ctx: RequestContext = Depends(authorize_request(PLATFORM_ADMIN)),
    db: Session = Depends(get_db),
):
    service = AgencyService(db)
    agencies = service.list_agencies(tenant_id)
    return AgencyListResponse(agencies=agencies, total=len(agencies))
