from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional


class TripGeneralInfoCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200, examples=["O que levar"])
    description: str = Field(..., min_length=1)
    display_order: int = Field(0, ge=0)


class TripGeneralInfoUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=1)
    display_order: Optional[int] = Field(None, ge=0)


class TripGeneralInfoResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    trip_id: int
    title: str
    description: str
    display_order: int
    created_at: datetime
    updated_at: datetime


class TripGeneralInfoListResponse(BaseModel):
    general_info: list[TripGeneralInfoResponse]
    total: int
