"""
API Routes - FastAPI endpoints for founding member availability.

- GET /api/founding-member/spots: spots remaining, always 200
- GET /api/founding-member/availability: detailed availability
- GET /health: store connectivity

The service instance lives on app.state and is handed to the
endpoints through a dependency, so tests can swap the store.
"""

import logging
from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from ..core.config import settings
from ..core.utils import get_timestamp
from ..models.schemas import (
    AvailabilityResponse,
    ErrorResponse,
    HealthResponse,
    SpotsRemainingResponse
)
from ..services.founding_members import AvailabilityUnavailable, FoundingMemberService

# Configure logging
logger = logging.getLogger(__name__)

# Create the router
router = APIRouter()


def get_service(request: Request) -> FoundingMemberService:
    """Dependency returning the process-wide FoundingMemberService."""
    return request.app.state.service


# ============================================================
# Founding Member Endpoints
# ============================================================

@router.get(
    "/api/founding-member/spots",
    response_model=SpotsRemainingResponse,
    response_model_exclude_none=True,
    summary="Founding member spots remaining",
    description="""
    Number of founding member spots still available.

    This endpoint always answers 200. When the count cannot be read
    it reports the full allotment together with an `error` field.
    """
)
async def get_spots_remaining(
    response: Response,
    service: FoundingMemberService = Depends(get_service)
) -> SpotsRemainingResponse:
    # Counts change with every signup
    response.headers["Cache-Control"] = "no-store"
    return await service.get_spots_remaining()


@router.get(
    "/api/founding-member/availability",
    response_model=AvailabilityResponse,
    summary="Founding member availability",
    description="Remaining spots, current founding members and the allotment.",
    responses={
        500: {"model": ErrorResponse, "description": "Count could not be read"}
    }
)
async def get_availability(
    service: FoundingMemberService = Depends(get_service)
):
    """
    Detailed availability for the signup flow.

    Unlike the spots endpoint this one reports failures as 500.
    """
    try:
        return await service.get_availability()
    except AvailabilityUnavailable as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(
                error="Failed to check founding member availability",
                detail=str(e),
                timestamp=get_timestamp()
            ).model_dump()
        )


# ============================================================
# Utility Endpoints
# ============================================================

@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health of the API and its tenant store."
)
async def health_check(
    service: FoundingMemberService = Depends(get_service)
) -> HealthResponse:
    """
    Perform a health check.

    Verifies that a count query against the store succeeds.
    """
    store_healthy = await service.store.health_check()

    return HealthResponse(
        status="healthy" if store_healthy else "degraded",
        version=settings.api_version,
        store_connected=store_healthy,
        timestamp=get_timestamp()
    )
