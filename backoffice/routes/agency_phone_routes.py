from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from backoffice.database import get_db
from backoffice.dependencies import RequestContext, authorize_request
from backoffice.routes import AGENCY_ADMINS, SUPERADMIN_ONLY
from backoffice.schemas.agency_phone_schemas import (
    AgencyPhoneCreate,
    AgencyPhoneListResponse,
    AgencyPhoneResponse,
    AgencyPhoneUpdate,
)
from backoffice.services.agency_phone_service import AgencyPhoneService

router = APIRouter()


@router.post("", response_model=AgencyPhoneResponse, status_code=status.HTTP_201_CREATED)
async def create_phone(
    agency_id: int,
    data: AgencyPhoneCreate,
    ctx: RequestContext = Depends(authorize_request(SUPERADMIN_ONLY)),
    db: Session = Depends(get_db),
):
    """
    Register a phone for the agency.

    - **Requires superadmin**
    - Number must not be registered by any agency
    """
    service = AgencyPhoneService(db)
    return service.create_phone(agency_id, data, ctx.require_tenant())


@router.get("", response_model=AgencyPhoneListResponse)
async def list_phones(
    agency_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = AgencyPhoneService(db)
    phones = service.list_phones(agency_id, ctx.require_tenant())
    return AgencyPhoneListResponse(phones=phones, total=len(phones))


@router.get("/main", response_model=AgencyPhoneResponse)
async def get_main_phone(
    agency_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    """First phone of type "main" of the agency"""
    service = AgencyPhoneService(db)
    return service.get_main_phone(agency_id, ctx.require_tenant())


@router.get("/{phone_id}", response_model=AgencyPhoneResponse)
async def get_phone(
    agency_id: int,
    phone_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = AgencyPhoneService(db)
    return service.get_phone(agency_id, phone_id, ctx.require_tenant())


@router.patch("/{phone_id}", response_model=AgencyPhoneResponse)
async def update_phone(
    agency_id: int,
    phone_id: int,
    data: AgencyPhoneUpdate,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = AgencyPhoneService(db)
    return service.update_phone(agency_id, phone_id, data, ctx.require_tenant())


@router.delete("/{phone_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_phone(
    agency_id: int,
    phone_id: int,
    ctx: RequestContext = Depends(authorize_request(SUPERADMIN_ONLY)),
    db: Session = Depends(get_db),
):
    service = AgencyPhoneService(db)
    service.delete_phone(agency_id, phone_id, ctx.require_tenant())
    return Response(status_code=status.HTTP_204_NO_CONTENT)
