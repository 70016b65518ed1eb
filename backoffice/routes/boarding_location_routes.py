from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from backoffice.database import get_db
from backoffice.dependencies import RequestContext, authorize_request
from backoffice.routes import AGENCY_ADMINS
from backoffice.schemas.boarding_location_schemas import (
    BoardingLocationCreate,
    BoardingLocationListResponse,
    BoardingLocationResponse,
    BoardingLocationUpdate,
)
from backoffice.services.boarding_location_service import BoardingLocationService

router = APIRouter()


@router.post("", response_model=BoardingLocationResponse, status_code=status.HTTP_201_CREATED)
async def create_location(
    agency_id: int,
    data: BoardingLocationCreate,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = BoardingLocationService(db)
    return service.create_location(agency_id, data, ctx.require_tenant())


@router.get("", response_model=BoardingLocationListResponse)
async def list_locations(
    agency_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = BoardingLocationService(db)
    locations = service.list_locations(agency_id, ctx.require_tenant())
    return BoardingLocationListResponse(boarding_locations=locations, total=len(locations))


@router.get("/{location_id}", response_model=BoardingLocationResponse)
async def get_location(
    agency_id: int,
    location_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = BoardingLocationService(db)
    return service.get_location(agency_id, location_id, ctx.require_tenant())


@router.patch("/{location_id}", response_model=BoardingLocationResponse)
async def update_location(
    agency_id: int,
    location_id: int,
    data: BoardingLocationUpdate,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = BoardingLocationService(db)
    return service.update_location(agency_id, location_id, data, ctx.require_tenant())


@router.delete("/{location_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_location(
    agency_id: int,
    location_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = BoardingLocationService(db)
    service.delete_location(agency_id, location_id, ctx.require_tenant())
    return Response(status_code=status.HTTP_204_NO_CONTENT)
