"""
Pydantic models for API responses.

Field names on the wire are camelCase to match what the landing page
clients already read (`spotsRemaining`, `remainingSpots`...).
"""

from pydantic import BaseModel, Field
from typing import Optional


class SpotsRemainingResponse(BaseModel):
    """
    Response of GET /api/founding-member/spots.

    `error` is only present when the count failed; in that case
    `spots_remaining` is the optimistic fallback.
    """
    spots_remaining: int = Field(
        ...,
        ge=0,
        alias="spotsRemaining",
        description="Founding member spots still available"
    )
    error: Optional[str] = Field(
        default=None,
        description="Set when the count query failed"
    )

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "examples": [
                {"spotsRemaining": 63},
                {"spotsRemaining": 100, "error": "Count failed"}
            ]
        }


class AvailabilityResponse(BaseModel):
    """Detailed founding member availability."""
    is_available: bool = Field(..., alias="isAvailable")
    remaining_spots: int = Field(..., ge=0, alias="remainingSpots")
    current_founding_members: int = Field(..., ge=0, alias="currentFoundingMembers")
    limit: int

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "isAvailable": True,
                "remainingSpots": 63,
                "currentFoundingMembers": 37,
                "limit": 100
            }
        }


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    service: str = "founding-member-spots-api"
    version: str
    store_connected: bool
    timestamp: str


class ErrorResponse(BaseModel):
    """Generic error response."""
    error: str
    detail: Optional[str] = None
    timestamp: str
