from datetime import datetime
from enum import Enum
from pydantic import BaseModel, Field
from typing import Optional


class ImageOperationType(str, Enum):
    """Declared intent of a multipart image request"""

    ADD = "ADD"
    UPDATE = "UPDATE"


class TripImageUpload(BaseModel):
    """
    Metadata sent in the "data" form field alongside an uploaded file.

    Example:
        {"display_order": 1, "is_main": true, "operation_type": "ADD"}
    """

    display_order: int = Field(default=0, ge=0)
    is_main: bool = False
    operation_type: ImageOperationType


class TripImageUpdate(BaseModel):
    """Metadata for an image update; a replacement file requires operation_type UPDATE"""

    display_order: Optional[int] = Field(None, ge=0)
    is_main: Optional[bool] = None
    operation_type: Optional[ImageOperationType] = None


class TripImageResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    trip_id: int
    image_url: str
    thumbnail_url: str
    is_main: bool
    display_order: int
    created_at: datetime
    updated_at: datetime


class TripImageListResponse(BaseModel):
    images: list[TripImageResponse]
    total: int
