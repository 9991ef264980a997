"""
Pydantic schemas for advertisement request endpoints.

Request bodies keep every field optional: presence and range checks live in
AdvertisementRequestService so that each failure gets its own message.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ========================================
# Request Schemas
# ========================================

class AdvertisementRequestCreate(BaseModel):
    """Request schema for submitting an advertisement request."""

    model_config = ConfigDict(populate_by_name=True)

    email: Optional[str] = Field(None, examples=["brand@example.com"])
    description: Optional[str] = Field(
        None,
        description="What the advertiser wants to promote",
        examples=["Pre-roll spot for a festive sale campaign"],
    )
    budget: Optional[Union[Decimal, str]] = Field(
        None,
        description="Budget in rupees, between 5,000 and 10,00,00,000",
        examples=[25000],
    )
    user_ip: Optional[str] = Field(None, alias="userIP", examples=["203.0.113.7"])


class RecentRequestCheck(BaseModel):
    """Request schema for checking whether an IP submitted recently."""

    model_config = ConfigDict(populate_by_name=True)

    user_ip: str = Field(..., alias="userIP", min_length=1)
    since: datetime = Field(..., description="Lower bound (inclusive) on created_at")


# ========================================
# Response Schemas
# ========================================

class AdvertisementRequestResponse(BaseModel):
    """
    A stored advertisement request.

    Only the id is required; rows are returned as stored even when older
    rows have null columns.
    """

    model_config = ConfigDict(extra="ignore")

    id: Union[int, str]
    email: Optional[str] = None
    description: Optional[str] = None
    budget: Optional[float] = None
    user_ip: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RecentRequestCheckResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    has_recent_request: bool = Field(..., alias="hasRecentRequest")


class SuccessResponse(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""

    error: str
