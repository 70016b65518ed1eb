from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional


class CancellationRuleInput(BaseModel):
    """One refund step: cancel at least days_before_trip days ahead, get refund_percentage back"""

    days_before_trip: int = Field(..., ge=0, le=365)
    refund_percentage: float = Field(..., ge=0, le=1, description="0.8 refunds 80%")
    display_order: int = Field(..., ge=1)


class CancellationPolicyCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, examples=["Flexível"])
    description: Optional[str] = Field(None, max_length=500)
    is_default: bool = False
    rules: list[CancellationRuleInput]


class CancellationPolicyUpdate(BaseModel):
    """
    Schema for updating a policy.

    When rules is sent it replaces every stored rule.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    is_default: Optional[bool] = None
    rules: Optional[list[CancellationRuleInput]] = None


class CancellationRuleResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    days_before_trip: int
    refund_percentage: float
    display_order: int


class CancellationPolicyResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    agency_id: int
    name: str
    description: Optional[str]
    is_default: bool
    rules: list[CancellationRuleResponse]
    created_at: datetime
    updated_at: datetime


class CancellationPolicyListResponse(BaseModel):
    policies: list[CancellationPolicyResponse]
    total: int
