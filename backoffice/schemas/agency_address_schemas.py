from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional
from backoffice.models.agency_address import AddressType

ZIP_CODE_PATTERN = r"^\d{5}-\d{3}$"


class AgencyAddressCreate(BaseModel):
    """Schema for registering an agency address (Brazilian postal format)"""

    type: AddressType
    address: str = Field(..., min_length=2, max_length=100, examples=["Rua das Flores"])
    number: str = Field(..., min_length=1, max_length=10)
    complement: Optional[str] = Field(None, max_length=50)
    neighborhood: str = Field(..., min_length=2, max_length=50)
    city: str = Field(..., min_length=2, max_length=50)
    state: str = Field(..., min_length=2, max_length=2, examples=["RJ"])
    zip_code: str = Field(..., pattern=ZIP_CODE_PATTERN, description="XXXXX-XXX", examples=["23968-000"])


class AgencyAddressUpdate(BaseModel):
    type: Optional[AddressType] = None
    address: Optional[str] = Field(None, min_length=2, max_length=100)
    number: Optional[str] = Field(None, min_length=1, max_length=10)
    complement: Optional[str] = Field(None, max_length=50)
    neighborhood: Optional[str] = Field(None, min_length=2, max_length=50)
    city: Optional[str] = Field(None, min_length=2, max_length=50)
    state: Optional[str] = Field(None, min_length=2, max_length=2)
    zip_code: Optional[str] = Field(None, pattern=ZIP_CODE_PATTERN)


class AgencyAddressResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    agency_id: int
    type: AddressType
    address: str
    number: str
    complement: Optional[str]
    neighborhood: str
    city: str
    state: str
    zip_code: str
    created_at: datetime
    updated_at: datetime


class AgencyAddressListResponse(BaseModel):
    addresses: list[AgencyAddressResponse]
    total: int
