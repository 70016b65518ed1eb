from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional


class TripPriceGroupCreate(BaseModel):
    """Schema for pricing a trip for one age range"""

    age_range_id: int
    final_price: float = Field(..., ge=0, examples=[450.0])
    original_price: Optional[float] = Field(None, ge=0, description="Crossed-out price; must exceed final_price")
    display_order: int = Field(1, ge=1)
    description: Optional[str] = Field(None, max_length=500)
    is_active: bool = True


class TripPriceGroupUpdate(BaseModel):
    """Partial update; the price rule is checked against the merged values"""

    age_range_id: Optional[int] = None
    final_price: Optional[float] = Field(None, ge=0)
    original_price: Optional[float] = Field(None, ge=0)
    display_order: Optional[int] = Field(None, ge=1)
    description: Optional[str] = Field(None, max_length=500)
    is_active: Optional[bool] = None


class PriceGroupAgeRange(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str
    min_age: int
    max_age: int
    occupies_seat: bool


class TripPriceGroupResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    trip_id: int
    age_range_id: int
    final_price: float
    original_price: Optional[float]
    display_order: int
    description: Optional[str]
    is_active: bool
    age_range: PriceGroupAgeRange
    created_at: datetime
    updated_at: datetime


class TripPriceGroupListResponse(BaseModel):
    price_groups: list[TripPriceGroupResponse]
    total: int
