"""
Models module containing Pydantic schemas.
"""

from .schemas import (
    SpotsRemainingResponse,
    AvailabilityResponse,
    HealthResponse,
    ErrorResponse
)

__all__ = [
    "SpotsRemainingResponse",
    "AvailabilityResponse",
    "HealthResponse",
    "ErrorResponse"
]
