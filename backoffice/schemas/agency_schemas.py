from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional

CADASTUR_PATTERN = r"^\d{2}\.\d{5}\.\d{2}/\d{4}-\d{2}$"
CNPJ_PATTERN = r"^\d{2}\.\d{3}\.\d{3}/\d{4}-\d{2}$"


class AgencyCreate(BaseModel):
    """Schema for creating an agency under a tenant"""

    name: str = Field(..., min_length=2, max_length=100)
    cadastur: str = Field(..., pattern=CADASTUR_PATTERN, description="XX.XXXXX.XX/XXXX-XX")
    cnpj: str = Field(..., pattern=CNPJ_PATTERN, description="XX.XXX.XXX/XXXX-XX")
    description: Optional[str] = Field(None, max_length=500)


class AgencyUpdate(BaseModel):
    """Schema for updating an agency"""

    name: Optional[str] = Field(None, min_length=2, max_length=100)
    cadastur: Optional[str] = Field(None, pattern=CADASTUR_PATTERN)
    cnpj: Optional[str] = Field(None, pattern=CNPJ_PATTERN)
    description: Optional[str] = Field(None, max_length=500)


class AgencyResponse(BaseModel):
    """Schema for agency response"""

    model_config = {"from_attributes": True}

    id: int
    tenant_id: int
    name: str
    cadastur: str
    cnpj: str
    description: Optional[str]
    created_at: datetime
    updated_at: datetime


class AgencyListResponse(BaseModel):
    agencies: list[AgencyResponse]
    total: int
