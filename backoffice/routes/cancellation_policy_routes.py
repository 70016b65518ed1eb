from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from backoffice.database import get_db
from backoffice.dependencies import RequestContext, authorize_request
from backoffice.routes import AGENCY_ADMINS
from backoffice.schemas.cancellation_policy_schemas import (
    CancellationPolicyCreate,
    CancellationPolicyListResponse,
    CancellationPolicyResponse,
    CancellationPolicyUpdate,
)
from backoffice.services.cancellation_policy_service import CancellationPolicyService

router = APIRouter()


@router.post("", response_model=CancellationPolicyResponse, status_code=status.HTTP_201_CREATED)
async def create_policy(
    agency_id: int,
    data: CancellationPolicyCreate,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    """
    Create a cancellation policy with its refund rules.

    - At least one rule; days and display order unique within the policy
    - Refunds must not grow as the trip gets closer
    - **is_default** clears the flag on the agency's other policies
    """
    service = CancellationPolicyService(db)
    return service.create_policy(agency_id, data, ctx.require_tenant())


@router.get("", response_model=CancellationPolicyListResponse)
async def list_policies(
    agency_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    """List policies, default first"""
    service = CancellationPolicyService(db)
    policies = service.list_policies(agency_id, ctx.require_tenant())
    return CancellationPolicyListResponse(policies=policies, total=len(policies))


@router.get("/default", response_model=CancellationPolicyResponse)
async def get_default_policy(
    agency_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = CancellationPolicyService(db)
    return service.get_default_policy(agency_id, ctx.require_tenant())


@router.get("/{policy_id}", response_model=CancellationPolicyResponse)
async def get_policy(
    agency_id: int,
    policy_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = CancellationPolicyService(db)
    return service.get_policy(agency_id, policy_id, ctx.require_tenant())


@router.patch("/{policy_id}", response_model=CancellationPolicyResponse)
async def update_policy(
    agency_id: int,
    policy_id: int,
    data: CancellationPolicyUpdate,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    """Update a policy; a rules list replaces the stored rules"""
    service = CancellationPolicyService(db)
    return service.update_policy(agency_id, policy_id, data, ctx.require_tenant())


@router.delete("/{policy_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_policy(
    agency_id: int,
    policy_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = CancellationPolicyService(db)
    service.delete_policy(agency_id, policy_id, ctx.require_tenant())
    return Response(status_code=status.HTTP_204_NO_CONTENT)
