from datetime import datetime
from pydantic import BaseModel, Field, HttpUrl, TypeAdapter, ValidationError, field_validator
from typing import Optional
from backoffice.models.agency_social import SocialPlatform

_http_url = TypeAdapter(HttpUrl)


def _check_url(value: str | None) -> str | None:
    # Kept as sent; HttpUrl would normalise it
    if value is not None:
        try:
            _http_url.validate_python(value)
        except ValidationError as e:
            raise ValueError("URL must be a valid http(s) address") from e
    return value


class AgencySocialCreate(BaseModel):
    """Schema for registering a social network profile"""

    type: SocialPlatform
    url: str = Field(..., min_length=10, max_length=200, examples=["https://instagram.com/boraturismo"])

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str | None) -> str | None:
        return _check_url(value)


class AgencySocialUpdate(BaseModel):
    type: Optional[SocialPlatform] = None
    url: Optional[str] = Field(None, min_length=10, max_length=200)

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str | None) -> str | None:
        return _check_url(value)


class AgencySocialResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    agency_id: int
    type: SocialPlatform
    url: str
    created_at: datetime
    updated_at: datetime


class AgencySocialListResponse(BaseModel):
    socials: list[AgencySocialResponse]
    total: int
