from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional


class BoardingLocationCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=100, examples=["Rodoviária Novo Rio"])
    description: Optional[str] = Field(None, max_length=200)
    city: str = Field(..., min_length=2, max_length=100)


class BoardingLocationUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    description: Optional[str] = Field(None, max_length=200)
    city: Optional[str] = Field(None, min_length=2, max_length=100)


class BoardingLocationResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    agency_id: int
    name: str
    description: Optional[str]
    city: str
    created_at: datetime
    updated_at: datetime


class BoardingLocationListResponse(BaseModel):
    boarding_locations: list[BoardingLocationResponse]
    total: int
