from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from backoffice.database import get_db
from backoffice.dependencies import RequestContext, authorize_request
from backoffice.routes import AGENCY_ADMINS, AGENCY_STAFF
from backoffice.schemas.trip_item_schemas import (
    TripItemCreate,
    TripItemListResponse,
    TripItemResponse,
    TripItemUpdate,
)
from backoffice.services.trip_item_service import TripItemService

router = APIRouter()


@router.post("", response_model=TripItemResponse, status_code=status.HTTP_201_CREATED)
async def create_item(
    agency_id: int,
    trip_id: int,
    data: TripItemCreate,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = TripItemService(db)
    return service.create_item(agency_id, trip_id, data, ctx.require_tenant())


@router.get("", response_model=TripItemListResponse)
async def list_items(
    agency_id: int,
    trip_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_STAFF)),
    db: Session = Depends(get_db),
):
    service = TripItemService(db)
    items = service.list_items(agency_id, trip_id, ctx.require_tenant())
    return TripItemListResponse(items=items, total=len(items))


@router.get("/{item_id}", response_model=TripItemResponse)
async def get_item(
    agency_id: int,
    trip_id: int,
    item_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_STAFF)),
    db: Session = Depends(get_db),
):
    service = TripItemService(db)
    return service.get_item(agency_id, trip_id, item_id, ctx.require_tenant())


@router.patch("/{item_id}", response_model=TripItemResponse)
async def update_item(
    agency_id: int,
    trip_id: int,
    item_id: int,
    data: TripItemUpdate,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = TripItemService(db)
    return service.update_item(agency_id, trip_id, item_id, data, ctx.require_tenant())


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(
    agency_id: int,
    trip_id: int,
    item_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = TripItemService(db)
    service.delete_item(agency_id, trip_id, item_id, ctx.require_tenant())
    return Response(status_code=status.HTTP_204_NO_CONTENT)
