from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional
from backoffice.models.trip import TripStatus


class TripCreate(BaseModel):
    """Schema for creating a trip"""

    slug: str = Field(..., min_length=1, max_length=200, examples=["ilha-grande-2025-09-20"])
    destination: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    video_url: Optional[str] = Field(None, max_length=500)
    departure_date: datetime
    return_date: datetime
    total_seats: int = Field(..., ge=1)
    status: TripStatus = TripStatus.ACTIVE
    category_id: Optional[int] = None
    cancellation_policy_id: Optional[int] = None


class TripUpdate(BaseModel):
    """
    Schema for updating a trip.

    The main image fields are not accepted here; they follow the trip's
    images.
    """

    slug: Optional[str] = Field(None, min_length=1, max_length=200)
    destination: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    video_url: Optional[str] = Field(None, max_length=500)
    departure_date: Optional[datetime] = None
    return_date: Optional[datetime] = None
    total_seats: Optional[int] = Field(None, ge=1)
    status: Optional[TripStatus] = None
    category_id: Optional[int] = None
    cancellation_policy_id: Optional[int] = None


class TripResponse(BaseModel):
    """Schema for trip response"""

    model_config = {"from_attributes": True}

    id: int
    agency_id: int
    slug: str
    destination: str
    description: Optional[str]
    video_url: Optional[str]
    departure_date: datetime
    return_date: datetime
    total_seats: int
    status: TripStatus
    main_image_url: Optional[str]
    main_image_thumbnail_url: Optional[str]
    category_id: Optional[int]
    cancellation_policy_id: Optional[int]
    created_at: datetime
    updated_at: datetime


class TripListResponse(BaseModel):
    trips: list[TripResponse]
    total: int
