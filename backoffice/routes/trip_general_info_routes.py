from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from backoffice.database import get_db
from backoffice.dependencies import RequestContext, authorize_request
from backoffice.routes import AGENCY_ADMINS, AGENCY_STAFF
from backoffice.schemas.trip_general_info_schemas import (
    TripGeneralInfoCreate,
    TripGeneralInfoListResponse,
    TripGeneralInfoResponse,
    TripGeneralInfoUpdate,
)
from backoffice.services.trip_general_info_service import TripGeneralInfoService

router = APIRouter()


@router.post("", response_model=TripGeneralInfoResponse, status_code=status.HTTP_201_CREATED)
async def create_info(
    agency_id: int,
    trip_id: int,
    data: TripGeneralInfoCreate,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = TripGeneralInfoService(db)
    return service.create_info(agency_id, trip_id, data, ctx.require_tenant())


@router.get("", response_model=TripGeneralInfoListResponse)
async def list_info(
    agency_id: int,
    trip_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_STAFF)),
    db: Session = Depends(get_db),
):
    service = TripGeneralInfoService(db)
    items = service.list_info(agency_id, trip_id, ctx.require_tenant())
    return TripGeneralInfoListResponse(general_info=items, total=len(items))


@router.get("/{info_id}", response_model=TripGeneralInfoResponse)
async def get_info(
    agency_id: int,
    trip_id: int,
    info_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_STAFF)),
    db: Session = Depends(get_db),
):
    service = TripGeneralInfoService(db)
    return service.get_info(agency_id, trip_id, info_id, ctx.require_tenant())


@router.patch("/{info_id}", response_model=TripGeneralInfoResponse)
async def update_info(
    agency_id: int,
    trip_id: int,
    info_id: int,
    data: TripGeneralInfoUpdate,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = TripGeneralInfoService(db)
    return service.update_info(agency_id, trip_id, info_id, data, ctx.require_tenant())


@router.delete("/{info_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_info(
    agency_id: int,
    trip_id: int,
    info_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = TripGeneralInfoService(db)
    service.delete_info(agency_id, trip_id, info_id, ctx.require_tenant())
    return Response(status_code=status.HTTP_204_NO_CONTENT)
