from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from backoffice.database import get_db
from backoffice.dependencies import RequestContext, authorize_request
from backoffice.routes import AGENCY_ADMINS, SUPERADMIN_ONLY
from backoffice.schemas.agency_address_schemas import (
    AgencyAddressCreate,
    AgencyAddressListResponse,
    AgencyAddressResponse,
    AgencyAddressUpdate,
)
from backoffice.services.agency_address_service import AgencyAddressService

router = APIRouter()


@router.post("", response_model=AgencyAddressResponse, status_code=status.HTTP_201_CREATED)
async def create_address(
    agency_id: int,
    data: AgencyAddressCreate,
    ctx: RequestContext = Depends(authorize_request(SUPERADMIN_ONLY)),
    db: Session = Depends(get_db),
):
    """Register an address for the agency (superadmin only)"""
    service = AgencyAddressService(db)
    return service.create_address(agency_id, data, ctx.require_tenant())


@router.get("", response_model=AgencyAddressListResponse)
async def list_addresses(
    agency_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = AgencyAddressService(db)
    addresses = service.list_addresses(agency_id, ctx.require_tenant())
    return AgencyAddressListResponse(addresses=addresses, total=len(addresses))


@router.get("/main", response_model=AgencyAddressResponse)
async def get_main_address(
    agency_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    """First address of type "main" of the agency"""
    service = AgencyAddressService(db)
    return service.get_main_address(agency_id, ctx.require_tenant())


@router.get("/{address_id}", response_model=AgencyAddressResponse)
async def get_address(
    agency_id: int,
    address_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = AgencyAddressService(db)
    return service.get_address(agency_id, address_id, ctx.require_tenant())


@router.patch("/{address_id}", response_model=AgencyAddressResponse)
async def update_address(
    agency_id: int,
    address_id: int,
    data: AgencyAddressUpdate,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = AgencyAddressService(db)
    return service.update_address(agency_id, address_id, data, ctx.require_tenant())


@router.delete("/{address_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_address(
    agency_id: int,
    address_id: int,
    ctx: RequestContext = Depends(authorize_request(SUPERADMIN_ONLY)),
    db: Session = Depends(get_db),
):
    service = AgencyAddressService(db)
    service.delete_address(agency_id, address_id, ctx.require_tenant())
    return Response(status_code=status.HTTP_204_NO_CONTENT)
