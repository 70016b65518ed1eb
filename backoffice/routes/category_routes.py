from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from backoffice.database import get_db
from backoffice.dependencies import RequestContext, authorize_request
from backoffice.routes import AGENCY_ADMINS
from backoffice.schemas.category_schemas import (
    CategoryCreate,
    CategoryListResponse,
    CategoryResponse,
    CategoryUpdate,
)
from backoffice.services.category_service import CategoryService

router = APIRouter()


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    agency_id: int,
    data: CategoryCreate,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = CategoryService(db)
    return service.create_category(agency_id, data, ctx.require_tenant())


@router.get("", response_model=CategoryListResponse)
async def list_categories(
    agency_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    """List the agency's categories by name"""
    service = CategoryService(db)
    categories = service.list_categories(agency_id, ctx.require_tenant())
    return CategoryListResponse(categories=categories, total=len(categories))


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    agency_id: int,
    category_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = CategoryService(db)
    return service.get_category(agency_id, category_id, ctx.require_tenant())


@router.patch("/{category_id}", response_model=CategoryResponse)
async def update_category(
    agency_id: int,
    category_id: int,
    data: CategoryUpdate,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    service = CategoryService(db)
    return service.update_category(agency_id, category_id, data, ctx.require_tenant())


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    agency_id: int,
    category_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
):
    """Delete a category no trip is filed under"""
    service = CategoryService(db)
    service.delete_category(agency_id, category_id, ctx.require_tenant())
    return Response(status_code=status.HTTP_204_NO_CONTENT)
