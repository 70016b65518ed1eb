from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from backoffice.database import get_db
from backoffice.dependencies import RequestContext, authorize_request
from backoffice.routes import AGENCY_ADMINS, AGENCY_STAFF
from backoffice.schemas.trip_price_group_schemas import (
    TripPriceGroupCreate,
    TripPriceGroupListResponse,
    TripPriceGroupResponse,
    TripPriceGroupUpdate,
)
from backoffice.services.trip_price_group_service import TripPriceGroupService

router = APIRouter()


@router.post("", response_model=TripPriceGroupResponse, status_code=status.HTTP_201_CREATED)
async def create_price_group(
    agency_id: int,
    trip_id: int,
    data: TripPriceGroupCreate,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    """
    Price the trip for one of the agency's age ranges.

    **original_price**, when sent, must be greater than **final_price**.
    """
    service = TripPriceGroupService(db)
    return service.create_price_group(agency_id, trip_id, data, ctx.require_tenant())


@router.get("", response_model=TripPriceGroupListResponse)
async def list_price_groups(
    agency_id: int,
    trip_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_STAFF)),
    db: Session = Depends(get_db),
):
    """List the trip's price groups by display order"""
    service = TripPriceGroupService(db)
    groups = service.list_price_groups(agency_id, trip_id, ctx.require_tenant())
    return TripPriceGroupListResponse(price_groups=groups, total=len(groups))


@router.get("/{group_id}", response_model=TripPriceGroupResponse)
async def get_price_group(
    agency_id: int,
    trip_id: int,
    group_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_STAFF)),
    db: Session = Depends(get_db),
):
    service = TripPriceGroupService(db)
    return service.get_price_group(agency_id, trip_id, group_id, ctx.require_tenant())


@router.patch("/{group_id}", response_model=TripPriceGroupResponse)
async def update_price_group(
    agency_id: int,
    trip_id: int,
    group_id: int,
    data: TripPriceGroupUpdate,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = TripPriceGroupService(db)
    return service.update_price_group(agency_id, trip_id, group_id, data, ctx.require_tenant())


@router.delete("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_price_group(
    agency_id: int,
    trip_id: int,
    group_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = TripPriceGroupService(db)
    service.delete_price_group(agency_id, trip_id, group_id, ctx.require_tenant())
    return Response(status_code=status.HTTP_204_NO_CONTENT)
