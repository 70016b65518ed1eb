from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from backoffice.database import get_db
from backoffice.dependencies import RequestContext, authorize_request
from backoffice.routes import AGENCY_ADMINS, SUPERADMIN_ONLY
from backoffice.schemas.agency_schemas import AgencyResponse, AgencyUpdate
from backoffice.services.agency_service import AgencyService
from backoffice.storage import ImageStorage, get_storage

router = APIRouter()


@router.get("/{agency_id}", response_model=AgencyResponse)
async def get_agency(
    agency_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    """Get agency details within the resolved tenant"""
    service = AgencyService(db)
    return service.get_agency(agency_id, ctx.require_tenant())


@router.patch("/{agency_id}", response_model=AgencyResponse)
async def update_agency(
    agency_id: int,
    data: AgencyUpdate,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = AgencyService(db)
    return service.update_agency(agency_id, data, ctx.require_tenant())


@router.delete("/{agency_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_agency(
    agency_id: int,
    ctx: RequestContext = Depends(authorize_request(SUPERADMIN_ONLY)),
    db: Session = Depends(get_db),
    storage: ImageStorage = Depends(get_storage),
):
    """Delete agency and its trips, age ranges and phones (superadmin only)"""
    service = AgencyService(db, storage)
    service.delete_agency(agency_id, ctx.require_tenant())
    return Response(status_code=status.HTTP_204_NO_CONTENT)
