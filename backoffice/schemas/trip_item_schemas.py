from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional


class TripItemCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200, examples=["Travel insurance"])
    is_included: bool


class TripItemUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    is_included: Optional[bool] = None


class TripItemResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    trip_id: int
    name: str
    is_included: bool
    created_at: datetime
    updated_at: datetime


class TripItemListResponse(BaseModel):
    items: list[TripItemResponse]
    total: int
