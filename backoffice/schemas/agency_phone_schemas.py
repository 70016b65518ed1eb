from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional
from backoffice.models.agency_phone import PhoneType

PHONE_NUMBER_PATTERN = r"^\(\d{2}\)\s\d{4,5}-\d{4}$"


class AgencyPhoneCreate(BaseModel):
    """Schema for registering an agency phone"""

    type: PhoneType
    number: str = Field(
        ...,
        pattern=PHONE_NUMBER_PATTERN,
        description="(XX) XXXXX-XXXX or (XX) XXXX-XXXX",
        examples=["(11) 99999-9999"],
    )


class AgencyPhoneUpdate(BaseModel):
    type: Optional[PhoneType] = None
    number: Optional[str] = Field(None, pattern=PHONE_NUMBER_PATTERN)


class AgencyPhoneResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    agency_id: int
    type: PhoneType
    number: str
    created_at: datetime
    updated_at: datetime


class AgencyPhoneListResponse(BaseModel):
    phones: list[AgencyPhoneResponse]
    total: int
