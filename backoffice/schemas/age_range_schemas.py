from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional


class AgeRangeCreate(BaseModel):
    """Schema for creating an age range"""

    name: str = Field(..., min_length=1, max_length=100, examples=["Adult"])
    min_age: int = Field(..., ge=0, le=120)
    max_age: int = Field(..., ge=0, le=120)
    occupies_seat: bool = True


class AgeRangeUpdate(BaseModel):
    """Schema for updating an age range; omitted bounds keep their stored value"""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    min_age: Optional[int] = Field(None, ge=0, le=120)
    max_age: Optional[int] = Field(None, ge=0, le=120)
    occupies_seat: Optional[bool] = None


class AgeRangeResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    agency_id: int
    name: str
    min_age: int
    max_age: int
    occupies_seat: bool
    created_at: datetime
    updated_at: datetime


class AgeRangeListResponse(BaseModel):
    age_ranges: list[AgeRangeResponse]
    total: int
