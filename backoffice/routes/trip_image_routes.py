from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from backoffice.core.exceptions import ValidationException
from backoffice.database import get_db
from backoffice.dependencies import RequestContext, authorize_request
from backoffice.routes import AGENCY_ADMINS, AGENCY_STAFF
from backoffice.schemas.trip_image_schemas import (
    TripImageListResponse,
    TripImageResponse,
    TripImageUpdate,
    TripImageUpload,
)
from backoffice.services.trip_image_service import TripImageService
from backoffice.storage import ImageStorage, get_storage

router = APIRouter()


def _parse_data(model: type[BaseModel], raw: str):
    """Validate the JSON carried in the multipart "data" field"""
    try:
        return model.model_validate_json(raw)
    except ValidationError as e:
        raise ValidationException(f"Invalid image data: {e.errors()[0]['msg']}") from e


async def _read(file: UploadFile | None) -> bytes | None:
    if file is None:
        return None
    return await file.read()


@router.post("", response_model=TripImageResponse, status_code=status.HTTP_201_CREATED)
async def upload_image(
    agency_id: int,
    trip_id: int,
    file: Optional[UploadFile] = File(None),
    data: str = Form(..., description='JSON, e.g. {"display_order": 0, "is_main": true, "operation_type": "ADD"}'),
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
    storage: ImageStorage = Depends(get_storage),
):
    """
    Upload an image for the trip.

    - Multipart: "file" (image) and "data" (JSON metadata)
    - operation_type must be ADD
    - is_main=true makes it the trip's only main image
    """
    metadata = _parse_data(TripImageUpload, data)
    service = TripImageService(db, storage)
    return service.upload_image(agency_id, trip_id, await _read(file), metadata, ctx.require_tenant())


@router.get("", response_model=TripImageListResponse)
async def list_images(
    agency_id: int,
    trip_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_STAFF)),
    db: Session = Depends(get_db),
    storage: ImageStorage = Depends(get_storage),
):
    """List trip images by display order"""
    service = TripImageService(db, storage)
    images = service.list_images(agency_id, trip_id, ctx.require_tenant())
    return TripImageListResponse(images=images, total=len(images))


@router.get("/{image_id}", response_model=TripImageResponse)
async def get_image(
    agency_id: int,
    trip_id: int,
    image_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_STAFF)),
    db: Session = Depends(get_db),
    storage: ImageStorage = Depends(get_storage),
):
    service = TripImageService(db, storage)
    return service.get_image(agency_id, trip_id, image_id, ctx.require_tenant())


@router.patch("/{image_id}", response_model=TripImageResponse)
async def update_image(
    agency_id: int,
    trip_id: int,
    image_id: int,
    file: Optional[UploadFile] = File(None),
    data: str = Form("{}"),
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
    storage: ImageStorage = Depends(get_storage),
):
    """
    Update display order and/or main flag, optionally replacing the file.

    A replacement file requires operation_type UPDATE in "data".
    """
    metadata = _parse_data(TripImageUpdate, data)
    service = TripImageService(db, storage)
    return service.update_image(
        agency_id, trip_id, image_id, await _read(file), metadata, ctx.require_tenant()
    )


@router.delete("/{image_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_image(
    agency_id: int,
    trip_id: int,
    image_id: int,
    ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS)),
    db: Session = Depends(get_db),
    storage: ImageStorage = Depends(get_storage),
):
    """Delete the image and its stored files; a removed main image clears the trip's main image"""
    service = TripImageService(db, storage)
    service.remove_image(agency_id, trip_id, image_id, ctx.require_tenant())
    return Response(status_code=status.HTTP_204_NO_CONTENT)
