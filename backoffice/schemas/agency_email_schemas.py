from datetime import datetime
from pydantic import BaseModel, EmailStr, field_validator

EMAIL_MAX_LENGTH = 100


def _check_length(value: str | None) -> str | None:
    if value is not None and len(value) > EMAIL_MAX_LENGTH:
        raise ValueError(f"E-mail must have at most {EMAIL_MAX_LENGTH} characters")
    return value


class AgencyEmailCreate(BaseModel):
    """Schema for registering an agency e-mail"""

    email: EmailStr

    @field_validator("email")
    @classmethod
    def validate_length(cls, value: str | None) -> str | None:
        return _check_length(value)


class AgencyEmailUpdate(BaseModel):
    email: EmailStr | None = None

    @field_validator("email")
    @classmethod
    def validate_length(cls, value: str | None) -> str | None:
        return _check_length(value)


class AgencyEmailResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    agency_id: int
    email: str
    created_at: datetime
    updated_at: datetime


class AgencyEmailListResponse(BaseModel):
    emails: list[AgencyEmailResponse]
    total: int
