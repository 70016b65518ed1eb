from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from backoffice.database import get_db
from backoffice.dependencies import RequestContext, authorize_request
from backoffice.routes import AGENCY_ADMINS, SUPERADMIN_ONLY
from backoffice.schemas.agency_email_schemas import (
    AgencyEmailCreate,
    AgencyEmailListResponse,
    AgencyEmailResponse,
    AgencyEmailUpdate,
)
from backoffice.services.agency_email_service import AgencyEmailService

router = APIRouter()


@router.post("", response_model=AgencyEmailResponse, status_code=status.HTTP_201_CREATED)
async def create_email(
    agency_id: int,
    data: AgencyEmailCreate,
    ctx: RequestContext = Depends(authorize_request(SUPERADMIN_ONLY)),
    db: Session = Depends(get_db),
):
    """
    Register an e-mail for the agency.

    - **Requires superadmin**
    - Address must not be registered by any agency
    """
    service = AgencyEmailService(db)
    return service.create_email(agency_id, data, ctx.require_tenant())


@router.get("", response_model=AgencyEmailListResponse)
async def list_emails(
    agency_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = AgencyEmailService(db)
    emails = service.list_emails(agency_id, ctx.require_tenant())
    return AgencyEmailListResponse(emails=emails, total=len(emails))


@router.get("/main", response_model=AgencyEmailResponse)
async def get_main_email(
    agency_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    """Earliest e-mail registered for the agency"""
    service = AgencyEmailService(db)
    return service.get_main_email(agency_id, ctx.require_tenant())


@router.get("/{email_id}", response_model=AgencyEmailResponse)
async def get_email(
    agency_id: int,
    email_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = AgencyEmailService(db)
    return service.get_email(agency_id, email_id, ctx.require_tenant())


@router.patch("/{email_id}", response_model=AgencyEmailResponse)
async def update_email(
    agency_id: int,
    email_id: int,
    data: AgencyEmailUpdate,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = AgencyEmailService(db)
    return service.update_email(agency_id, email_id, data, ctx.require_tenant())


@router.delete("/{email_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_email(
    agency_id: int,
    email_id: int,
    ctx: RequestContext = Depends(authorize_request(SUPERADMIN_ONLY)),
    db: Session = Depends(get_db),
):
    service = AgencyEmailService(db)
    service.delete_email(agency_id, email_id, ctx.require_tenant())
    return Response(status_code=status.HTTP_204_NO_CONTENT)
