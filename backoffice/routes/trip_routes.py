from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from backoffice.database import get_db
from backoffice.dependencies import RequestContext, authorize_request
from backoffice.routes import AGENCY_ADMINS, AGENCY_STAFF
from backoffice.schemas.trip_schemas import TripCreate, TripListResponse, TripResponse, TripUpdate
from backoffice.services.trip_service import TripService
from backoffice.storage import ImageStorage, get_storage

router = APIRouter()


@router.post("", response_model=TripResponse, status_code=status.HTTP_201_CREATED)
async def create_trip(
    agency_id: int,
    data: TripCreate,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    """Create a trip. Slug must be unique within the agency."""
    service = TripService(db)
    return service.create_trip(agency_id, data, ctx.require_tenant())


@router.get("", response_model=TripListResponse)
async def list_trips(
    agency_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_STAFF)),
    db: Session = Depends(get_db),
):
    """List the agency's trips, newest first"""
    service = TripService(db)
    trips = service.list_trips(agency_id, ctx.require_tenant())
    return TripListResponse(trips=trips, total=len(trips))


@router.get("/{trip_id}", response_model=TripResponse)
async def get_trip(
    agency_id: int,
    trip_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_STAFF)),
    db: Session = Depends(get_db),
):
    service = TripService(db)
    return service.get_trip(agency_id, trip_id, ctx.require_tenant())


@router.patch("/{trip_id}", response_model=TripResponse)
async def update_trip(
    agency_id: int,
    trip_id: int,
    data: TripUpdate,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = TripService(db)
    return service.update_trip(agency_id, trip_id, data, ctx.require_tenant())


@router.delete("/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_trip(
    agency_id: int,
    trip_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
    storage: ImageStorage = Depends(get_storage),
):
    """Delete trip with its items and images (stored files included)"""
    service = TripService(db, storage)
    service.delete_trip(agency_id, trip_id, ctx.require_tenant())
    return Response(status_code=status.HTTP_204_NO_CONTENT)
