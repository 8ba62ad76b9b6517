"""
Founding Member Service - Spots remaining and availability.

Sits between the HTTP routes and the tenant store. The store is
passed in, so tests can hand over any object exposing the same
count coroutines.
"""

import logging

from ..core.errors import StoreError, StoreSchemaError
from ..core.utils import remaining_spots
from ..models.schemas import AvailabilityResponse, SpotsRemainingResponse

# Configure logging
logger = logging.getLogger(__name__)

COUNT_FAILED = "Count failed"

# Reported when the count cannot be read, whatever the configured limit
FALLBACK_SPOTS = 100


class AvailabilityUnavailable(Exception):
    """Neither the founding member count nor its fallback could be read."""


class FoundingMemberService:
    """
    Computes founding member availability from tenant counts.

    Attributes:
        store: Object with count_founding_members() and
            count_non_demo_tenants() coroutines (see TenantStore)
        limit: Total founding member allotment
    """

    def __init__(self, store, limit: int = 100):
        if limit < 0:
            raise ValueError(f"Founding member limit must be >= 0, got {limit}")
        self.store = store
        self.limit = limit

    async def get_spots_remaining(self) -> SpotsRemainingResponse:
        """
        Spots left out of the allotment.

        Never raises. Any failure, whatever its cause, yields
        FALLBACK_SPOTS plus an error marker so that a page showing the
        counter keeps rendering.
        """
        try:
            count = await self.store.count_founding_members()
        except StoreError as e:
            logger.warning(f"Founding member count failed ({type(e).__name__}): {e}")
            return self._fallback()
        except Exception as e:
            logger.error(f"Unexpected error counting founding members: {e}", exc_info=True)
            return self._fallback()

        return SpotsRemainingResponse(spots_remaining=remaining_spots(self.limit, count))

    async def get_availability(self) -> AvailabilityResponse:
        """
        Detailed availability.

        If the tenants table has no founding member column yet, every
        non-demo tenant counts as a founding member.

        Raises:
            AvailabilityUnavailable: If no count could be obtained
        """
        try:
            count = await self.store.count_founding_members()
        except StoreSchemaError as e:
            logger.warning(f"Founding member column unavailable, counting non-demo tenants: {e}")
            count = await self._count_non_demo()
        except StoreError as e:
            logger.error(f"Error counting founding members: {e}")
            raise AvailabilityUnavailable(str(e)) from e

        current = count or 0
        remaining = remaining_spots(self.limit, current)

        return AvailabilityResponse(
            is_available=remaining > 0,
            remaining_spots=remaining,
            current_founding_members=current,
            limit=self.limit
        )

    async def _count_non_demo(self):
        try:
            return await self.store.count_non_demo_tenants()
        except StoreError as e:
            logger.error(f"Error counting tenants: {e}")
            raise AvailabilityUnavailable(str(e)) from e

    def _fallback(self) -> SpotsRemainingResponse:
        return SpotsRemainingResponse(spots_remaining=FALLBACK_SPOTS, error=COUNT_FAILED)
