from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from backoffice.database import get_db
from backoffice.dependencies import RequestContext, authorize_request
from backoffice.routes import AGENCY_ADMINS
from backoffice.schemas.age_range_schemas import (
    AgeRangeCreate,
    AgeRangeListResponse,
    AgeRangeResponse,
    AgeRangeUpdate,
)
from backoffice.services.age_range_service import AgeRangeService

router = APIRouter()


@router.post("", response_model=AgeRangeResponse, status_code=status.HTTP_201_CREATED)
async def create_age_range(
    agency_id: int,
    data: AgeRangeCreate,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    """
    Create an age range.

    - min_age must be lower than max_age
    - Name must be unique within the agency
    - Must not overlap another range of the agency (touching bounds are allowed)
    """
    service = AgeRangeService(db)
    return service.create_age_range(agency_id, data, ctx.require_tenant())


@router.get("", response_model=AgeRangeListResponse)
async def list_age_ranges(
    agency_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    """List age ranges in creation order"""
    service = AgeRangeService(db)
    age_ranges = service.list_age_ranges(agency_id, ctx.require_tenant())
    return AgeRangeListResponse(age_ranges=age_ranges, total=len(age_ranges))


@router.get("/{age_range_id}", response_model=AgeRangeResponse)
async def get_age_range(
    agency_id: int,
    age_range_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = AgeRangeService(db)
    return service.get_age_range(agency_id, age_range_id, ctx.require_tenant())


@router.patch("/{age_range_id}", response_model=AgeRangeResponse)
async def update_age_range(
    agency_id: int,
    age_range_id: int,
    data: AgeRangeUpdate,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = AgeRangeService(db)
    return service.update_age_range(agency_id, age_range_id, data, ctx.require_tenant())


@router.delete("/{age_range_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_age_range(
    agency_id: int,
    age_range_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = AgeRangeService(db)
    service.delete_age_range(agency_id, age_range_id, ctx.require_tenant())
    return Response(status_code=status.HTTP_204_NO_CONTENT)
