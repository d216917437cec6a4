"""
Pydantic models for request/response validation.
"""
import math
from typing import Optional, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr, field_validator

CONTENT_MESSAGE = "Content is required and must be a non-empty string"
TTL_MESSAGE = "ttl_seconds must be a positive number"
MAX_VIEWS_MESSAGE = "max_views must be a positive integer"
BODY_MESSAGE = "Request body must be a JSON object"

# Client-facing message for each field that can fail validation
FIELD_MESSAGES = {
    "content": CONTENT_MESSAGE,
    "ttl_seconds": TTL_MESSAGE,
    "max_views": MAX_VIEWS_MESSAGE,
}


class PasteCreate(BaseModel):
    """Schema for creating a new paste."""
    content: StrictStr = Field(..., description="Text content (required, non-empty)")
    ttl_seconds: Optional[StrictFloat] = Field(None, description="Optional TTL in seconds")
    max_views: Optional[Union[StrictInt, StrictFloat]] = Field(
        None, description="Optional view limit"
    )

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError(CONTENT_MESSAGE)
        return stripped

    @field_validator("ttl_seconds")
    @classmethod
    def ttl_positive_finite(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and (not math.isfinite(value) or value <= 0):
            raise ValueError(TTL_MESSAGE)
        return value

    @field_validator("max_views")
    @classmethod
    def max_views_positive_integer(cls, value: Optional[Union[int, float]]) -> Optional[int]:
        if value is None:
            return None
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError(MAX_VIEWS_MESSAGE)
            value = int(value)
        if value <= 0:
            raise ValueError(MAX_VIEWS_MESSAGE)
        return value


class PasteResponse(BaseModel):
    """Schema for paste creation response."""
    id: str = Field(..., description="Unique paste ID")
    url: str = Field(..., description="Shareable URL to view the paste")


class PasteView(BaseModel):
    """Schema for viewing/fetching a paste."""
    content: str = Field(..., description="Paste text content")
    created_at: int = Field(..., description="Creation time (ms since epoch)")
    expires_at: Optional[int] = Field(None, description="Expiry time (ms since epoch, null if no TTL)")
    views_remaining: Optional[int] = Field(None, description="Views left (null if unlimited)")


class HealthCheck(BaseModel):
    """Schema for health check response."""
    status: str = Field("ok", description="Service status")


class ErrorResponse(BaseModel):
    """Schema for every error body the API returns."""
    error: str
    message: str
