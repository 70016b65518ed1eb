from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from backoffice.database import get_db
from backoffice.dependencies import RequestContext, authorize_request
from backoffice.models.agency_social import SocialPlatform
from backoffice.routes import AGENCY_ADMINS, SUPERADMIN_ONLY
from backoffice.schemas.agency_social_schemas import (
    AgencySocialCreate,
    AgencySocialListResponse,
    AgencySocialResponse,
    AgencySocialUpdate,
)
from backoffice.services.agency_social_service import AgencySocialService

router = APIRouter()


@router.post("", response_model=AgencySocialResponse, status_code=status.HTTP_201_CREATED)
async def create_social(
    agency_id: int,
    data: AgencySocialCreate,
    ctx: RequestContext = Depends(authorize_request(SUPERADMIN_ONLY)),
    db: Session = Depends(get_db),
):
    """
    Register a social network profile.

    - **Requires superadmin**
    - One profile per platform and agency
    """
    service = AgencySocialService(db)
    return service.create_social(agency_id, data, ctx.require_tenant())


@router.get("", response_model=AgencySocialListResponse)
async def list_socials(
    agency_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = AgencySocialService(db)
    socials = service.list_socials(agency_id, ctx.require_tenant())
    return AgencySocialListResponse(socials=socials, total=len(socials))


@router.get("/active", response_model=AgencySocialListResponse)
async def list_active_socials(
    agency_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    """Profiles to show publicly; every stored profile is active"""
    service = AgencySocialService(db)
    socials = service.list_socials(agency_id, ctx.require_tenant())
    return AgencySocialListResponse(socials=socials, total=len(socials))


@router.get("/platform/{platform}", response_model=AgencySocialResponse)
async def get_social_by_platform(
    agency_id: int,
    platform: SocialPlatform,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = AgencySocialService(db)
    return service.get_by_platform(agency_id, platform, ctx.require_tenant())


@router.get("/{social_id}", response_model=AgencySocialResponse)
async def get_social(
    agency_id: int,
    social_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = AgencySocialService(db)
    return service.get_social(agency_id, social_id, ctx.require_tenant())


@router.patch("/{social_id}", response_model=AgencySocialResponse)
async def update_social(
    agency_id: int,
    social_id: int,
    data: AgencySocialUpdate,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = AgencySocialService(db)
    return service.update_social(agency_id, social_id, data, ctx.require_tenant())


@router.delete("/{social_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_social(
    agency_id: int,
    social_id: int,
    ctx: RequestContext = Depends(authorize_request(SUPERADMIN_ONLY)),
    db: Session = Depends(get_db),
):
    service = AgencySocialService(db)
    service.delete_social(agency_id, social_id, ctx.require_tenant())
    return Response(status_code=status.HTTP_204_NO_CONTENT)
